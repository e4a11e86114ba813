from __future__ import annotations

from src.work_hours.work_hours.core.constants import SESSION_HOLIDAY_CARRY, SESSION_WEEKLY_OVERRIDE


def _add(client, date="2026-03-09", time_in="09:00", time_out="17:00", break_minutes="30"):
    return client.post(
        "/logs",
        data={"date": date, "time_in": time_in, "time_out": time_out, "break_minutes": break_minutes},
        follow_redirects=True,
    )


def _session(client):
    with client.session_transaction() as sess:
        return dict(sess)


def test_dashboard_requires_login(client):
    resp = client.get("/dashboard")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")


def test_login_and_logout(client):
    resp = client.post("/", data={"username": "demo", "password": "demo123"})
    assert resp.status_code == 302
    assert _session(client)["user_id"] == 1

    client.get("/logout")
    assert "user_id" not in _session(client)


def test_login_with_wrong_password(client):
    resp = client.post("/", data={"username": "demo", "password": "nope"})
    assert resp.status_code == 200
    assert b"Wrong username or password" in resp.data
    assert "user_id" not in _session(client)


def test_add_log_shows_in_history_and_totals(signed_in, logs_repo):
    resp = _add(signed_in)
    html = resp.get_data(as_text=True)

    assert "Log added." in html
    assert "2026-03-09" in html
    assert '<p class="display-6" id="weekly-hours">7.50</p>' in html
    assert len(logs_repo.list_for_user(1)) == 1


def test_invalid_log_is_rejected(signed_in, logs_repo):
    resp = _add(signed_in, time_in="17:00", time_out="09:00")
    assert b"Time out must be after time in" in resp.data
    assert logs_repo.list_for_user(1) == []


def test_duplicate_day_is_rejected(signed_in):
    _add(signed_in)
    resp = _add(signed_in, time_in="10:00")
    assert b"There is already a log for 2026-03-09" in resp.data


def test_edit_log(signed_in, logs_repo):
    _add(signed_in)
    [entry] = logs_repo.list_for_user(1)

    resp = signed_in.get(f"/logs/{entry.id}/edit")
    assert b"Edit log" in resp.data

    signed_in.post(
        "/logs",
        data={"log_id": str(entry.id), "date": "2026-03-09", "time_in": "09:00", "time_out": "18:00", "break_minutes": "0"},
    )
    assert logs_repo.get_by_id(1, entry.id).time_out == "18:00"


def test_holiday_hours_carry_until_collection_is_emptied(signed_in, logs_repo):
    _add(signed_in)

    resp = signed_in.post("/holiday-hours", data={"hours": "6"}, follow_redirects=True)
    html = resp.get_data(as_text=True)
    assert "Holiday hours saved: 6.00 hours" in html
    assert 'id="weekly-hours">13.50<' in html
    assert _session(signed_in)[SESSION_HOLIDAY_CARRY] == {"1": 6.0}

    [entry] = logs_repo.list_for_user(1)
    resp = signed_in.post(f"/logs/{entry.id}/delete", follow_redirects=True)
    assert b"Log deleted." in resp.data
    assert b"No logs yet." in resp.data
    assert _session(signed_in)[SESSION_HOLIDAY_CARRY] == {}


def test_carry_survives_sign_out_for_same_user(signed_in):
    _add(signed_in)
    signed_in.post("/holiday-hours", data={"hours": "2.5"})
    signed_in.get("/logout")

    resp = signed_in.post("/", data={"username": "demo", "password": "demo123"}, follow_redirects=True)
    assert b'id="weekly-hours">10.00<' in resp.data


def test_carry_does_not_cross_accounts(client, logs_repo):
    for user_id in (1, 2):
        logs_repo.add(user_id=user_id, date="2026-03-09", time_in="09:00", time_out="17:00", break_minutes=30)

    client.post("/", data={"username": "demo", "password": "demo123"})
    client.post("/holiday-hours", data={"hours": "8"})
    client.get("/logout")

    resp = client.post("/", data={"username": "sam", "password": "sam123"}, follow_redirects=True)
    assert b'<p class="display-6" id="weekly-hours">7.50</p>' in resp.data

    # the other user's empty-collection reset must not wipe user 1's hours
    for entry in logs_repo.list_for_user(2):
        client.post(f"/logs/{entry.id}/delete")
    client.get("/dashboard")
    client.get("/logout")

    resp = client.post("/", data={"username": "demo", "password": "demo123"}, follow_redirects=True)
    assert b'<p class="display-6" id="weekly-hours">15.50</p>' in resp.data


def test_invalid_log_id_is_reported(signed_in, logs_repo):
    resp = signed_in.post(
        "/logs",
        data={"log_id": "abc", "date": "2026-03-09", "time_in": "09:00", "time_out": "17:00"},
        follow_redirects=True,
    )
    assert b"Invalid log id" in resp.data
    assert logs_repo.list_for_user(1) == []


def test_unexpected_error_during_save_is_not_a_bad_log_id(app, signed_in, monkeypatch):
    def boom(*args, **kwargs):
        raise ValueError("driver exploded")

    monkeypatch.setattr(app.extensions["work_hours"].log_service, "save_log", boom)
    resp = _add(signed_in)
    assert b"System error while saving the log" in resp.data
    assert b"Invalid log id" not in resp.data


def test_weekly_override_until_logs_change(signed_in):
    _add(signed_in)

    resp = signed_in.post("/weekly-hours", data={"hours": "20"}, follow_redirects=True)
    assert b"manually set to 20.00" in resp.data
    assert b'id="weekly-hours">20.00<' in resp.data
    assert _session(signed_in)[SESSION_WEEKLY_OVERRIDE] == 20.0

    resp = _add(signed_in, date="2026-03-10", time_in="08:00", time_out="12:00", break_minutes="0")
    assert b'id="weekly-hours">11.50<' in resp.data
    assert SESSION_WEEKLY_OVERRIDE not in _session(signed_in)


def test_calculate_holiday_hours_from_total(signed_in):
    resp = signed_in.post("/holiday-hours/calculate", data={"total_hours": "150"})
    assert resp.status_code == 200
    assert b"6.00 holiday hours" in resp.data


def test_calculate_holiday_hours_from_logs(signed_in):
    _add(signed_in, date="2026-03-09", time_in="08:00", time_out="18:00", break_minutes="0")
    resp = signed_in.post("/holiday-hours/calculate", data={"holiday_date": "2026-03-17"})
    assert b"0.40 holiday hours" in resp.data


def test_bad_holiday_input_flashes_warning(signed_in):
    resp = signed_in.post("/holiday-hours/calculate", data={"total_hours": "lots"}, follow_redirects=True)
    assert b"Total hours must be a number" in resp.data


def test_history_filters_and_sort(signed_in):
    _add(signed_in, date="2026-03-09")
    _add(signed_in, date="2025-12-01")

    html = signed_in.get("/dashboard?year=2025").get_data(as_text=True)
    history = html.split('id="log-history"', 1)[1]
    assert "2025-12-01" in history
    assert "2026-03-09" not in history

    html = signed_in.get("/dashboard?sort=asc").get_data(as_text=True)
    history = html.split('id="log-history"', 1)[1]
    assert history.index("2025-12-01") < history.index("2026-03-09")
