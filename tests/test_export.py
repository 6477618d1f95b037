from wedding_planner.services.export_service import guests_to_csv, tasks_to_csv


def test_guest_csv_quotes_every_cell():
    csv_text = guests_to_csv([
        {"name": "Amit Patel", "email": "amit@example.com", "phone": "555", "side": "Patel",
         "rsvpStatus": "confirmed"},
    ])
    assert csv_text == (
        "Name,Email,Phone,Side,RSVP Status\n"
        '"Amit Patel","amit@example.com","555","Patel","confirmed"\n'
    )


def test_embedded_quotes_commas_and_missing_values():
    csv_text = guests_to_csv([{"name": 'Ravi "Ricky", Jr', "side": "Friends"}])
    lines = csv_text.splitlines()
    assert lines[1] == '"Ravi ""Ricky"", Jr","","","Friends","pending"'


def test_task_csv():
    csv_text = tasks_to_csv([
        {"title": "Book venue", "category": "venue", "status": "done", "assigned_to": "bride",
         "due_date": "2024-01-15"},
    ])
    assert csv_text.splitlines() == [
        "Title,Description,Category,Status,Assigned To,Due Date",
        '"Book venue","","venue","done","bride","2024-01-15"',
    ]


def test_empty_export_is_header_only():
    assert guests_to_csv([]) == "Name,Email,Phone,Side,RSVP Status\n"
