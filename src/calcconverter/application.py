from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import sys
import os
from typing import List, Optional

from calcconverter.config import ORG_ID, ORG_DOMAIN, APP_ID, VISIBLE_APP_NAME


def create_app(argv: Optional[List[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    return app
