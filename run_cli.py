import typer

import kickcombo.cli

if __name__ == "__main__":
    typer_app: typer.Typer = kickcombo.cli.app
    typer_app()
