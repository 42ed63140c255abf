"""Process entry point: `donation-api` (or `python -m donation_api`)."""
import uvicorn

from donation_api.core.config import get_settings
from donation_api.main import create_app


def main() -> None:
    # raises (and exits non-zero) when MONGO_URI is missing
    settings = get_settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
