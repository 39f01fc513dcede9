from supabase import create_client, Client

from ..core.config import Config


def get_client(config: Config) -> Client:
    return create_client(config.SUPABASE_URL, config.SUPABASE_SERVICE_KEY)


def check_database(config: Config) -> None:
    """Run a one-row select against the probe table; raises when the database is unreachable."""
    if not config.database_configured:
        raise RuntimeError("SUPABASE_URL and SUPABASE_SERVICE_KEY environment variables are required")

    supabase = get_client(config)
    supabase.table(config.DB_PROBE_TABLE).select('id').limit(1).execute()
