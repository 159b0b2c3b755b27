"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) objects and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Application State (AppState).
2. Instantiates the Main Window (View), which owns the Controllers.
3. Passes the State into the View so they can communicate.
"""
import argparse
import logging
from typing import List, Optional

from calcconverter.application import create_app
from calcconverter.logging_config import setup_logging
from calcconverter.model.state import AppState
from calcconverter.view.main_window import MainWindow


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="calcconverter", description="Calculator and unit converter.")
    parser.add_argument("--debug", action="store_true", help="log everything, including key presses")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    # Qt consumes its own options (-platform, -style, ...)
    args, _ = parser.parse_known_args(argv)
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    state = AppState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
