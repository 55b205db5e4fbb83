#!/usr/bin/env python
"""Initialize database and seed an admin profile."""
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from exceptions import LoadBoardException
from models import init_db, UserRole
from models.database import SessionLocal
from services import UserService

ADMIN_USER_ID = os.environ.get("ADMIN_USER_ID", "00000000-0000-0000-0000-000000000001")
ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@example.com")


def create_admin_profile():
    """Create the admin profile for the configured auth user id."""
    db = SessionLocal()
    try:
        users = UserService(db)
        if users.users.exists(ADMIN_USER_ID):
            print("Admin profile already exists")
            return

        profile = users.create_profile(
            ADMIN_USER_ID,
            full_name="Administrator",
            role=UserRole.ADMIN,
            email=ADMIN_EMAIL,
        )
        print(f"✅ Created admin profile: {profile.id}")

    except LoadBoardException as e:
        print(f"❌ Error creating admin profile: {e}")
    finally:
        db.close()


def main():
    """Initialize database."""
    print("🗄️  Initializing database...")

    try:
        init_db()
        print("✅ Database tables created")

        create_admin_profile()

        print("✅ Database initialization complete!")

    except Exception as e:
        print(f"❌ Error initializing database: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
