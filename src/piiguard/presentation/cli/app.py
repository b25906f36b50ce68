"""PIIGuard CLI application using Typer.

Provides secret generation for deployment configuration and a command
to run the API server.
"""

import secrets

import typer
import uvicorn
from rich.console import Console

app = typer.Typer(
    name="piiguard",
    help="PIIGuard - user accounts with encrypted PII",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for PIIGuard configuration.

    Generates the two required secrets:
    - JWT_SECRET_KEY: Secret for signing access tokens
    - CRYPTO_SECRET_KEY: Secret for encrypting email and name fields

    Copy the output to your .env file. Changing CRYPTO_SECRET_KEY later
    makes every stored record unreadable.
    """
    console.print("\n[bold green]PIIGuard Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    crypto_secret = secrets.token_urlsafe(32)
    console.print(f"[cyan]CRYPTO_SECRET_KEY[/cyan]={crypto_secret}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (production) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind"),
    port: int = typer.Option(8000, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    uvicorn.run(
        "piiguard.presentation.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
