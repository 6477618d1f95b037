#!/usr/bin/env python3
"""
Create the tables and a demo wedding (login: priya.sharma / password123)
"""
import os
import sys
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv
load_dotenv()

from wedding_planner.db.database import Base, engine
from wedding_planner import models  # noqa: F401
from wedding_planner.seed import DEMO_USERNAME, DEMO_PASSWORD, seed_demo_wedding


def create_demo_wedding():
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)

    if seed_demo_wedding():
        print(f"Demo wedding created. Login: {DEMO_USERNAME} / {DEMO_PASSWORD}")
    else:
        print(f"Demo user {DEMO_USERNAME} already exists, nothing to do")


if __name__ == "__main__":
    create_demo_wedding()
