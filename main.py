from set_harvester.interface.cli import app


if __name__ == "__main__":
    app()
