"""Seed the `clothes` table from data/sample_clothes.json.

Usage:
    python scripts/seed_data.py [path/to/clothes.json]

Rows are upserted on `id`, so re-running is safe. The anonymous key usually
cannot write to `clothes`; point SUPABASE_ANON_KEY at a key with insert rights
(e.g. the service role key) for the duration of the run.
"""
import json
import os
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config.database import create_supabase_client, SupabaseClientError
from config.settings import get_settings
from core.logging import configure_logging, get_logger
from domain.constants import TABLES
from utils.paths import resolve_data_file

logger = get_logger("scripts.seed_data")


def load_rows(path: str):
    with open(path, 'r', encoding='utf-8') as f:
        rows = json.load(f)
    if not isinstance(rows, list):
        raise ValueError(f"{path} must contain a JSON list of clothes")
    return rows


def seed(client, rows) -> int:
    resp = client.table(TABLES['clothes']).upsert(rows, on_conflict='id').execute()
    return len(resp.data or [])


def main(argv):
    settings = get_settings()
    configure_logging(json_logs=settings.use_json_logs, log_level=settings.log_level)
    path = argv[1] if len(argv) > 1 else resolve_data_file('sample_clothes.json')
    if not path or not os.path.exists(path):
        logger.error("Seed file not found", path=path)
        return 1
    try:
        client = create_supabase_client(settings)
    except SupabaseClientError as e:
        logger.error("Cannot seed without a backend", error=str(e))
        return 1
    rows = load_rows(path)
    written = seed(client, rows)
    logger.info("Seeded clothes", path=path, rows=len(rows), written=written)
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
