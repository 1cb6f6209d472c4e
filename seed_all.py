"""
Master Database Seeding Script
Creates database tables and populates them with demo data through the service layer
"""

import sys
from datetime import datetime
from sqlalchemy.orm import Session

from app.database import SessionLocal
from app.services import membership, project_service, task_board, query_board
from app.utils.errors import CollabError, ConflictError
from create_tables import create_tables
from demo_data import DEMO_ADMINS, DEMO_MEMBERS, DEMO_TASKS, DEMO_QUERIES

def seed_demo_admins(db: Session) -> int:
    """Onboard demo admins and register their projects"""
    created = 0
    for admin in DEMO_ADMINS:
        membership.resolve_onboarding(
            db,
            email=admin["email"],
            claimed_role=admin["role"],
            project_code_input=admin["project_code"],
            profile_fields=admin
        )
        try:
            project_service.create_project(db, admin["project_code"], admin["project_name"], admin["email"])
            created += 1
            print(f"[SUCCESS] Created project: {admin['project_name']} ({admin['project_code']})")
        except ConflictError:
            print(f"[SKIP] Project {admin['project_code']} already exists, skipping...")
    return created

def seed_demo_members(db: Session) -> int:
    joined = 0
    for member in DEMO_MEMBERS:
        try:
            membership.resolve_onboarding(
                db,
                email=member["email"],
                claimed_role=member["role"],
                project_code_input=member["project_code"],
                profile_fields=member
            )
            joined += 1
            print(f"[SUCCESS] {member['email']} joined {member['project_code']}")
        except CollabError as e:
            print(f"[ERROR] {member['email']} could not join: {e.message}")
    return joined

def seed_demo_tasks(db: Session) -> int:
    for task in DEMO_TASKS:
        task_board.create_task(db, **task)
    print(f"[SUCCESS] Created {len(DEMO_TASKS)} demo tasks")
    return len(DEMO_TASKS)

def seed_demo_queries(db: Session) -> int:
    for query in DEMO_QUERIES:
        query_board.create_query(db, **query)
    print(f"[SUCCESS] Created {len(DEMO_QUERIES)} demo queries")
    return len(DEMO_QUERIES)

def seed(db: Session) -> dict:
    """Run every seeding step in order and return per-step counts"""
    return {
        "projects": seed_demo_admins(db),
        "members": seed_demo_members(db),
        "tasks": seed_demo_tasks(db),
        "queries": seed_demo_queries(db),
    }

def main():
    """Main function to run all seeding operations"""
    print("🌱 MASTER DATABASE SEEDING SCRIPT")
    print("=" * 60)
    print(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    if not create_tables():
        print("\n[ERROR] Table creation failed!")
        sys.exit(1)

    db = SessionLocal()
    try:
        summary = seed(db)
    except CollabError as e:
        print(f"\n[ERROR] Seeding failed: {e.message}")
        sys.exit(1)
    finally:
        db.close()

    print(f"\n{'='*60}")
    print("📊 SEEDING SUMMARY")
    print(f"{'='*60}")
    for step, count in summary.items():
        print(f"   - {step}: {count}")
    print(f"\nCompleted at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

if __name__ == "__main__":
    main()
