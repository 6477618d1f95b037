from wedding_planner import crud
from wedding_planner.seed import DEMO_USERNAME, seed_demo_wedding


def test_seed_creates_demo_wedding_once(db):
    assert seed_demo_wedding(db) is True
    assert seed_demo_wedding(db) is False

    user = crud.user.get_by_username(db, username=DEMO_USERNAME)
    assert user.wedding_profile_id is not None
    profile_id = user.wedding_profile_id

    guests = crud.guest.get_by_wedding_profile(db, wedding_profile_id=profile_id)
    # Couple from onboarding plus the sample guests
    assert [g.name for g in guests[:2]] == ["Priya Sharma", "Arjun Patel"]
    assert len(guests) == 5
    assert len(crud.event.get_by_wedding_profile(db, wedding_profile_id=profile_id)) == 5
    assert len(crud.task.get_by_wedding_profile(db, wedding_profile_id=profile_id)) == 4


def test_seeded_user_can_log_in(client, db):
    seed_demo_wedding(db)
    response = client.post("/api/auth/login", json={"username": DEMO_USERNAME, "password": "password123"})
    assert response.status_code == 200
    assert response.json()["user"]["role"] == "bride"
