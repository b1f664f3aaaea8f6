# main.py
from console import StoreConsole
from services.report_service import ReportService
from services.store import Store
from utils.logger import setup_logger


def main():
    logger = setup_logger()
    store = Store()
    console = StoreConsole(store, ReportService(store))
    logger.info("Store console started")
    console.run()


if __name__ == "__main__":
    main()
