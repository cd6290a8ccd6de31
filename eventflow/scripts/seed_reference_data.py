"""
Seed Reference Data Script
This script populates the plans and event_types tables using the config.
Can be run manually against a fresh Supabase project:

    python -m eventflow.scripts.seed_reference_data
"""

import sys

from eventflow.config.reference_data import DEFAULT_PLANS, DEFAULT_EVENT_TYPES
from eventflow.database.supabase_client import SupabaseClient
from supabase import Client
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_plans(supabase: Client, plans=DEFAULT_PLANS):
    """Seed plans from config; existing plans (by name) get their limits and price updated"""
    logger.info("Seeding plans...")

    created_count = 0
    updated_count = 0

    for plan in plans:
        try:
            existing = supabase.table("plans")\
                .select("id")\
                .eq("name", plan["name"])\
                .execute()

            if existing.data:
                supabase.table("plans")\
                    .update({
                        "max_events": plan["max_events"],
                        "price": plan["price"]
                    })\
                    .eq("name", plan["name"])\
                    .execute()
                updated_count += 1
                logger.debug(f"Updated plan: {plan['name']}")
            else:
                supabase.table("plans").insert({
                    "name": plan["name"],
                    "max_events": plan["max_events"],
                    "price": plan["price"]
                }).execute()
                created_count += 1
                logger.debug(f"Created plan: {plan['name']}")
        except Exception as e:
            logger.error(f"Error processing plan {plan['name']}: {e}")

    logger.info(f"Plans seeded: {created_count} created, {updated_count} updated")
    return created_count + updated_count


def seed_event_types(supabase: Client, names=DEFAULT_EVENT_TYPES):
    """Seed event types from config; names already present are left alone"""
    logger.info("Seeding event types...")

    created_count = 0

    for name in names:
        try:
            existing = supabase.table("event_types")\
                .select("id")\
                .eq("name", name)\
                .execute()

            if existing.data:
                continue

            supabase.table("event_types").insert({"name": name}).execute()
            created_count += 1
            logger.debug(f"Created event type: {name}")
        except Exception as e:
            logger.error(f"Error processing event type {name}: {e}")

    logger.info(f"Event types seeded: {created_count} created")
    return created_count


def main():
    """Main function to seed plans and event types"""
    try:
        supabase = SupabaseClient.get_service_client()

        logger.info("Starting reference data seeding...")

        plan_count = seed_plans(supabase)
        type_count = seed_event_types(supabase)

        logger.info("Seeding completed successfully!")
        logger.info(f"Total: {plan_count} plans, {type_count} event types processed")

    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
