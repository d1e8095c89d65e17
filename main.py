"""
main.py: Server launcher and entry point.

Run this file to start the hotel API server and open the interactive API docs:

    python main.py

The Streamlit front-end is started separately:

    streamlit run dashboard/app.py

This file does NOT contain application logic. See app.py for the FastAPI
application, service wiring, and startup sequence.

Direct uvicorn usage (without browser auto-open):
    uvicorn app:app --reload
"""

from __future__ import annotations

import threading
import time
import webbrowser

import uvicorn

from hotel_backend.utils.config import get_settings


def _open_browser_after_startup(url: str, delay_seconds: float = 2.0) -> None:
    """Open the API docs once uvicorn has had time to initialize the schema."""
    time.sleep(delay_seconds)
    print(f"\n  Opening API docs → {url}\n")
    webbrowser.open(url)


def main() -> None:
    """Start the hotel API server."""
    settings = get_settings()
    base_url = f"http://{settings.host}:{settings.port}"
    docs_url = f"{base_url}/docs"

    print("=" * 60)
    print(f"  {settings.app_name}")
    print("=" * 60)
    print(f"  Server   : {base_url}")
    print(f"  API root : {base_url}{settings.api_prefix}")
    print(f"  API docs : {docs_url}")
    print("=" * 60)
    print("  Press CTRL+C to stop\n")

    browser_thread = threading.Thread(
        target=_open_browser_after_startup,
        args=(docs_url,),
        daemon=True,
    )
    browser_thread.start()

    # Blocks until CTRL+C
    uvicorn.run(
        "app:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
