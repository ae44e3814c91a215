from fosterbook.config import Config


def main():
    """Entry point for api command for production use case."""
    import uvicorn

    Config.configure_logging()
    uvicorn.run(
        "fosterbook.api.app:app",
        host=Config.get_api_host(),
        port=Config.get_api_port(),
    )


def dev():
    """Run the API with auto-reload on the configured host and port."""
    import subprocess

    Config.configure_logging()
    subprocess.run(
        [
            "fastapi",
            "dev",
            "--host",
            Config.get_api_host(),
            "--port",
            str(Config.get_api_port()),
            "fosterbook/api/app.py",
        ]
    )


if __name__ == "__main__":
    main()
