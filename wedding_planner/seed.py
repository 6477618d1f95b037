"""Demo wedding for local development"""
from typing import Optional
import logging

from sqlalchemy.orm import Session

from wedding_planner import crud, schemas
from wedding_planner.db.database import SessionLocal

logger = logging.getLogger(__name__)

DEMO_USERNAME = "priya.sharma"
DEMO_PASSWORD = "password123"

DEMO_EVENTS = [
    {"name": "Haldi Ceremony", "description": "Traditional turmeric ceremony", "date": "2024-12-15",
     "time": "10:00 AM", "location": "Family Home", "progress": 75, "guest_count": 45,
     "icon": "sun", "color": "yellow"},
    {"name": "Mehndi Ceremony", "description": "Henna application ceremony", "date": "2024-12-16",
     "time": "2:00 PM", "location": "Garden Pavilion", "progress": 50, "guest_count": 60,
     "icon": "hand-paper", "color": "green"},
    {"name": "Sangeet", "description": "Musical celebration with dance and performances", "date": "2024-12-18",
     "time": "7:00 PM", "location": "Grand Palace Ballroom", "progress": 30, "guest_count": 150,
     "icon": "music", "color": "purple"},
    {"name": "Wedding Ceremony", "description": "Main wedding ceremony with sacred rituals", "date": "2024-12-20",
     "time": "11:00 AM", "location": "Grand Palace Hotel", "progress": 20, "guest_count": 300,
     "icon": "ring", "color": "red"},
    {"name": "Reception", "description": "Grand celebration and dinner for all guests", "date": "2024-12-20",
     "time": "7:00 PM", "location": "Grand Palace Hotel", "progress": 10, "guest_count": 300,
     "icon": "champagne-glasses", "color": "indigo"},
]

DEMO_GUESTS = [
    {"name": "Nikesh Patel", "email": "nikesh@example.com", "phone": "+1-555-0123",
     "side": "Patel", "rsvp_status": "confirmed"},
    {"name": "Neha Sharma", "email": "neha@example.com", "phone": "+1-555-0124",
     "side": "Sharma", "rsvp_status": "pending"},
    {"name": "Rahul Kumar", "email": "rahul@example.com", "phone": "+1-555-0125",
     "side": "Friends", "rsvp_status": "declined"},
]

DEMO_TASKS = [
    {"title": "Book wedding venue", "description": "Secure the main wedding venue",
     "category": "venue", "status": "done", "assigned_to": "bride", "due_date": "2024-01-15"},
    {"title": "Order invitations", "description": "Finalize design and print run",
     "category": "invitations", "status": "inprogress", "assigned_to": "groom", "due_date": "2024-09-01"},
    {"title": "Hire photographer", "category": "photography", "status": "todo",
     "assigned_to": "planner", "due_date": "2024-10-01"},
    {"title": "Choose mandap decor", "category": "decor", "status": "todo", "assigned_to": "parents"},
]

DEMO_BUDGET = [
    {"category": "venue", "vendor": "Grand Palace Hotel", "description": "Venue rental",
     "estimated_amount": 15000, "actual_amount": 15000, "paid_amount": 7500, "status": "partial"},
    {"category": "photography", "vendor": "Moments Studio", "estimated_amount": 5000,
     "actual_amount": 0, "paid_amount": 0, "status": "pending"},
    {"category": "food", "vendor": "Royal Caterers", "description": "Reception dinner",
     "estimated_amount": 12000, "actual_amount": 12500, "paid_amount": 12500, "status": "paid"},
]

DEMO_VENDORS = [
    {"name": "Grand Palace Hotel", "category": "venue", "contact": "Events Desk",
     "email": "events@grandpalace.example.com", "phone": "+91-22-5550-1000", "status": "booked"},
    {"name": "Moments Studio", "category": "photography", "contact": "Anil Mehta",
     "email": "anil@moments.example.com", "status": "contacted"},
    {"name": "Royal Caterers", "category": "food", "phone": "+91-22-5550-2000", "status": "active"},
]


def seed_demo_wedding(db: Optional[Session] = None) -> bool:
    """Create the demo user and wedding unless they already exist. Returns True when created."""
    own_session = db is None
    db = db or SessionLocal()
    try:
        if crud.user.get_by_username(db, username=DEMO_USERNAME):
            logger.info(f"Demo user {DEMO_USERNAME} already exists, skipping seed")
            return False

        user = crud.user.create(db, obj_in=schemas.RegisterRequest(
            username=DEMO_USERNAME, password=DEMO_PASSWORD, name="Priya Sharma", role="bride"
        ))
        profile = crud.wedding_profile.create_for_user(db, owner=user, obj_in=schemas.WeddingProfileCreate(
            bride_name="Priya Sharma",
            groom_name="Arjun Patel",
            wedding_start_date="2024-12-15",
            wedding_end_date="2024-12-20",
            venue="Grand Palace Hotel",
            city="Mumbai",
            state="Maharashtra",
            guest_count=300,
            budget=50000,
            functions=["haldi", "mehendi", "sangeet", "wedding", "reception"],
            theme="traditional",
            is_complete=True,
        ))

        for event in DEMO_EVENTS:
            crud.event.create_with_wedding_profile(
                db, obj_in=schemas.EventCreate(**event), wedding_profile_id=profile.id
            )
        for guest in DEMO_GUESTS:
            crud.guest.create_with_wedding_profile(
                db, obj_in=schemas.GuestCreate(**guest), wedding_profile_id=profile.id
            )
        for task in DEMO_TASKS:
            crud.task.create_with_wedding_profile(
                db, obj_in=schemas.TaskCreate(**task), wedding_profile_id=profile.id
            )
        for item in DEMO_BUDGET:
            crud.budget_item.create_with_wedding_profile(
                db, obj_in=schemas.BudgetItemCreate(**item), wedding_profile_id=profile.id
            )
        for vendor in DEMO_VENDORS:
            crud.vendor.create_with_wedding_profile(
                db, obj_in=schemas.VendorCreate(**vendor), wedding_profile_id=profile.id
            )

        logger.info(f"Seeded demo wedding profile {profile.id} for {DEMO_USERNAME}")
        return True
    finally:
        if own_session:
            db.close()
