def mark(client, api, admin_headers, date, records):
    return client.post(
        f"{api}/attendance",
        json={"date": date, "records": records},
        headers=admin_headers,
    )


def test_mark_attendance_returns_stored_day(client, api, admin_headers):
    response = mark(client, api, admin_headers, "2024-01-01", [
        {"name": "A", "status": "Present"},
        {"name": "B", "status": "Absent"},
    ])

    assert response.status_code == 200
    body = response.json()
    assert body["date"] == "2024-01-01"
    assert body["records"] == [
        {"name": "A", "status": "Present"},
        {"name": "B", "status": "Absent"},
    ]
    assert body["created_at"] is not None


def test_second_submission_replaces_the_day(client, api, admin_headers):
    mark(client, api, admin_headers, "2024-01-01", [{"name": "A", "status": "Present"}])
    mark(client, api, admin_headers, "2024-01-01", [
        {"name": "A", "status": "Absent"},
        {"name": "B", "status": "Present"},
    ])

    response = client.get(f"{api}/attendance/date/2024-01-01")

    assert response.status_code == 200
    assert response.json()["records"] == [
        {"name": "A", "status": "Absent"},
        {"name": "B", "status": "Present"},
    ]


def test_partial_resubmission_drops_unmentioned_students(client, api, admin_headers):
    mark(client, api, admin_headers, "2024-01-01", [
        {"name": "A", "status": "Present"},
        {"name": "B", "status": "Present"},
    ])
    mark(client, api, admin_headers, "2024-01-01", [{"name": "A", "status": "Absent"}])

    assert client.get(f"{api}/attendance/B").json()["total"] == 0


def test_empty_record_list_is_allowed(client, api, admin_headers):
    response = mark(client, api, admin_headers, "2024-01-02", [])

    assert response.status_code == 200
    assert response.json()["records"] == []


def test_missing_date_or_records_is_bad_request(client, api, admin_headers):
    for body in ({"records": []}, {"date": "2024-01-01"}, {"date": "", "records": []}, {}):
        response = client.post(f"{api}/attendance", json=body, headers=admin_headers)
        assert response.status_code == 400, body
        assert response.json() == {"message": "date and records[] required"}


def test_malformed_payloads_are_bad_request(client, api, admin_headers):
    bad_bodies = [
        {"date": "2024-01-01", "records": "A"},
        {"date": "2024-01-01", "records": [{"name": "A", "status": "Late"}]},
        {"date": "2024-01-01", "records": [{"status": "Present"}]},
        {"date": "01/02/2024", "records": []},
        {"date": "2024-1-2", "records": []},
        {"date": "2024-02-30", "records": []},
    ]
    for body in bad_bodies:
        response = client.post(f"{api}/attendance", json=body, headers=admin_headers)
        assert response.status_code == 400, body
        assert response.json()["message"]


def test_unknown_date_returns_empty_day(client, api):
    response = client.get(f"{api}/attendance/date/2030-05-06")

    assert response.status_code == 200
    assert response.json() == {"date": "2030-05-06", "records": []}


def test_malformed_date_lookup_is_bad_request(client, api):
    response = client.get(f"{api}/attendance/date/yesterday")

    assert response.status_code == 400


def test_history_percentage_and_order(client, api, admin_headers):
    # Submitted out of order; history comes back by date
    mark(client, api, admin_headers, "2024-01-03", [{"name": "A", "status": "Absent"}])
    mark(client, api, admin_headers, "2024-01-01", [{"name": "A", "status": "Present"}])
    mark(client, api, admin_headers, "2024-01-02", [
        {"name": "B", "status": "Absent"},
        {"name": "A", "status": "Present"},
    ])
    mark(client, api, admin_headers, "2024-01-04", [{"name": "B", "status": "Present"}])

    response = client.get(f"{api}/attendance/A")

    assert response.status_code == 200
    assert response.json() == {
        "name": "A",
        "present": 2,
        "total": 3,
        "percentage": 66.67,
        "history": [
            {"date": "2024-01-01", "status": "Present"},
            {"date": "2024-01-02", "status": "Present"},
            {"date": "2024-01-03", "status": "Absent"},
        ],
    }


def test_history_for_unknown_student(client, api):
    response = client.get(f"{api}/attendance/Nobody")

    assert response.status_code == 200
    assert response.json() == {
        "name": "Nobody",
        "present": 0,
        "total": 0,
        "percentage": 0,
        "history": [],
    }


def test_history_name_with_spaces(client, api, admin_headers):
    mark(client, api, admin_headers, "2024-01-01", [{"name": "Asha Verma", "status": "Present"}])

    response = client.get(f"{api}/attendance/Asha%20Verma")

    assert response.json()["percentage"] == 100


def test_student_named_date_still_reachable(client, api, admin_headers):
    mark(client, api, admin_headers, "2024-01-01", [{"name": "date", "status": "Absent"}])

    response = client.get(f"{api}/attendance/date")

    assert response.json()["total"] == 1


def test_resubmission_moves_updated_at_with_database_clock(client, api, admin_headers):
    first = mark(client, api, admin_headers, "2024-01-01", [{"name": "A", "status": "Present"}]).json()
    second = mark(client, api, admin_headers, "2024-01-01", [{"name": "A", "status": "Absent"}]).json()

    assert second["created_at"] == first["created_at"]
    assert second["updated_at"] is not None
    assert second["updated_at"] >= second["created_at"]
