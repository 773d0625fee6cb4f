import logging
import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core.config import load_config
from BackEnd.core.logger import setup_logger
from BackEnd.core.paths import log_path
from BackEnd.repos.session_repo import open_ledger
from BackEnd.services.timer_service import TimerService
from FrontEnd.ui_main import MainWindow

logger = logging.getLogger(__name__)

def main():
    config = load_config()
    setup_logger(log_path(config.resolved_data_dir()), level=config.log_level)
    logger.info("Starting Focus Timer (presets: %s)", config.presets)

    app = QApplication(sys.argv)
    ledger = open_ledger(config)
    timer = TimerService(config, last_id=ledger.last_id())
    timer.session_finished.connect(ledger.append)
    win = MainWindow(timer, ledger)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
