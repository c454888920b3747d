#!/usr/bin/env python3
"""
Database migration runner for Supabase.

Connects directly to the Supabase PostgreSQL database and applies the SQL
files in migrations/ in name order, recording each one in a tracking table.

Usage:
    python run_migrations.py            # Apply pending migrations
    python run_migrations.py --status   # Show migration status
    python run_migrations.py --dry-run  # Show what would run

Configuration:
    Set SUPABASE_DB_URL in your .env file (Supabase Dashboard → Settings →
    Database → Connection string → URI).
"""

import argparse
import hashlib
import sys
from dataclasses import dataclass
from pathlib import Path

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"


@dataclass(frozen=True)
class Migration:
    name: str
    path: Path
    checksum: str

    @property
    def content(self) -> str:
        return self.path.read_text()


def discover_migrations(directory: Path = MIGRATIONS_DIR) -> list[Migration]:
    """All .sql files in directory, sorted by name."""
    if not directory.exists():
        return []
    return [
        Migration(
            name=path.name,
            path=path,
            checksum=hashlib.sha256(path.read_bytes()).hexdigest()[:16],
        )
        for path in sorted(directory.glob("*.sql"))
    ]


def pending_migrations(
    migrations: list[Migration],
    applied: dict[str, str],
) -> tuple[list[Migration], list[Migration]]:
    """
    Split migrations into those not yet applied and those edited since.

    Args:
        migrations: Discovered migrations
        applied: Applied migration name -> recorded checksum

    Returns:
        (pending, changed)
    """
    pending = [m for m in migrations if m.name not in applied]
    changed = [
        m for m in migrations
        if m.name in applied and applied[m.name] != m.checksum
    ]
    return pending, changed


def get_db_connection():
    """Get a connection to the Supabase PostgreSQL database."""
    settings = get_settings()

    if not settings.supabase_db_url:
        console.print("[red]Error:[/red] SUPABASE_DB_URL is not set.")
        sys.exit(1)

    try:
        return psycopg2.connect(settings.supabase_db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_migrations_table(conn) -> None:
    """Create the migrations tracking table if it doesn't exist."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL(
                """
                CREATE TABLE IF NOT EXISTS {} (
                    id SERIAL PRIMARY KEY,
                    name VARCHAR(255) NOT NULL UNIQUE,
                    checksum VARCHAR(64) NOT NULL,
                    applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                )
                """
            ).format(sql.Identifier(MIGRATIONS_TABLE))
        )
    conn.commit()


def get_applied_migrations(conn) -> dict[str, str]:
    """Map of applied migration name to checksum."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        return {row[0]: row[1] for row in cur.fetchall()}


def apply_migration(conn, migration: Migration) -> None:
    """Run one migration and record it, in a single transaction."""
    console.print(f"[blue]Running:[/blue] {migration.name}...")
    try:
        with conn.cursor() as cur:
            cur.execute(migration.content)
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (migration.name, migration.checksum),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {migration.name} failed: {e}")
        raise
    console.print(f"[green]✓[/green] {migration.name} applied")


def show_status(migrations: list[Migration], applied: dict[str, str]) -> None:
    """Print a table of every known migration and its state."""
    if not migrations and not applied:
        console.print("[dim]No migrations found.[/dim]")
        return

    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Checksum")

    for m in migrations:
        if m.name not in applied:
            status = "[yellow]Pending[/yellow]"
        elif applied[m.name] != m.checksum:
            status = "[red]Changed[/red]"
        else:
            status = "[green]Applied[/green]"
        table.add_row(m.name, status, m.checksum)

    console.print(table)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run database migrations for Supabase")
    parser.add_argument("--status", action="store_true", help="Show migration status only")
    parser.add_argument("--dry-run", action="store_true", help="Show what would run")
    args = parser.parse_args()

    console.print("[bold]Argue Against the Machine: database migrations[/bold]")

    migrations = discover_migrations()
    conn = get_db_connection()

    try:
        ensure_migrations_table(conn)
        applied = get_applied_migrations(conn)

        if args.status:
            show_status(migrations, applied)
            return

        pending, changed = pending_migrations(migrations, applied)
        for m in changed:
            console.print(f"[yellow]Warning:[/yellow] {m.name} has changed since it was applied")

        if not pending:
            console.print("[green]All migrations are up to date![/green]")
            return

        for m in pending:
            if args.dry_run:
                console.print(f"[cyan]Would run:[/cyan] {m.name}")
            else:
                apply_migration(conn, m)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
