# create_tables.py
from app.database import Base, engine
import app.models  # noqa: F401  registers every table on Base.metadata

def create_tables(drop_existing: bool = False):
    """Create all tables, optionally dropping existing ones first"""
    try:
        if drop_existing:
            Base.metadata.drop_all(bind=engine)
            print("🗑️  Existing tables dropped")

        # Create all tables
        Base.metadata.create_all(bind=engine)
        print(f"✅ All tables created successfully on {engine.url.render_as_string(hide_password=True)}")
        return True

    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        return False

if __name__ == "__main__":
    import sys
    create_tables(drop_existing="--drop" in sys.argv)
