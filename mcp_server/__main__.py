"""Entry point: ``python -m mcp_server``."""

from dotenv import load_dotenv

# Load .env before settings are read
load_dotenv()

from mcp_server.server import run  # noqa: E402


def main() -> None:
    run()


if __name__ == "__main__":
    main()
