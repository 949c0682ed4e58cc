"""Main entry point for Location Dialogs."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from location_dialogs.api import create_fastapi_app
from location_dialogs.api.routes import control
from location_dialogs.config import resolve_locale
from location_dialogs.logging_config import get_logger, setup_logging
from sim import Sim

logger = get_logger("location_dialogs.main")


def main():
    """Run the dialog service with the scripted sim attached."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    setup_logging()

    api_host = os.getenv("API_HOST", "localhost")
    api_port = int(os.getenv("API_PORT", "8000"))
    api_url = f"http://{api_host}:{api_port}"

    logger.info(
        "Serving location dialogs on %s",
        api_url,
        extra={"context": {"locale": resolve_locale(os.getenv("DIALOG_LOCALE"))}},
    )

    control.set_sim_instance(Sim(api_url=api_url))

    # log_config=None keeps uvicorn on the JSON handlers set up above
    uvicorn.run(
        create_fastapi_app(),
        host=api_host,
        port=api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
