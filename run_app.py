import uvicorn

from dbip_client.logger import build_log_config


def main() -> None:
    """Run the DB-IP lookup service with uvicorn."""
    uvicorn.run(
        "dbip_client.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_config=build_log_config(),
    )


if __name__ == "__main__":
    main()
