import pytest

API = "/api/v1"


def _naive(ts: str) -> str:
    """Drop the UTC designator; SQLite hands timestamps back without one."""
    return ts.removesuffix("Z").split("+")[0]


@pytest.fixture
async def day_id(client):
    response = await client.post(
        f"{API}/routines",
        json={
            "name": "PPL",
            "days": [
                {"name": "Push", "sort_order": 1, "exercises": [{"name": "Bench Press", "target_config": "12-10-8"}]},
                {"name": "Pull", "sort_order": 2, "exercises": [{"name": "Deadlift", "target_config": "5-5-5"}]},
            ],
        },
    )
    return response.json()["days"][0]["id"]


async def _add_set(client, session_id, set_number, reps, weight, name="Bench Press"):
    response = await client.post(
        f"{API}/sessions/{session_id}/sets",
        json={"exercise_name": name, "set_number": set_number, "reps_performed": reps, "weight_used": weight},
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_start_unknown_day_is_404(client):
    response = await client.post(f"{API}/sessions/start", json={"routine_day_id": 999})
    assert response.status_code == 404


async def test_session_lifecycle(client, day_id):
    assert (await client.get(f"{API}/sessions/active")).json() is None
    assert (await client.get(f"{API}/sessions/active/exists")).json() == {"active": False}

    response = await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})
    assert response.status_code == 201
    session = response.json()
    assert session["status"] == "active"
    assert session["end_time"] is None
    assert [e["name"] for e in session["routine_day"]["exercises"]] == ["Bench Press"]

    first = await _add_set(client, session["id"], 1, 12, 135)
    await _add_set(client, session["id"], 2, 10, 145)
    assert first["volume"] == 1620.0

    active = (await client.get(f"{API}/sessions/active")).json()
    assert active["id"] == session["id"]
    assert [s["set_number"] for s in active["set_logs"]] == [1, 2]
    assert (await client.get(f"{API}/sessions/active/exists")).json() == {"active": True}

    ended = (await client.post(f"{API}/sessions/active/end")).json()
    assert ended["status"] == "ended"
    assert ended["total_volume"] == 1620.0 + 1450.0
    assert ended["duration_seconds"] >= 0

    assert (await client.get(f"{API}/sessions/active")).json() is None
    assert (await client.post(f"{API}/sessions/active/end")).json() is None

    stored = (await client.get(f"{API}/sessions/{session['id']}")).json()
    assert stored["status"] == "ended"
    assert len(stored["set_logs"]) == 2


async def test_start_force_ends_previous_session(client, day_id):
    first = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()
    second = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()

    assert (await client.get(f"{API}/sessions/active")).json()["id"] == second["id"]
    assert (await client.get(f"{API}/sessions/{first['id']}")).json()["status"] == "ended"


async def test_resume_returns_active_session_for_same_day(client, day_id):
    started = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()

    resumed = await client.post(f"{API}/sessions/resume", json={"routine_day_id": day_id})

    assert resumed.status_code == 200
    assert resumed.json()["id"] == started["id"]


async def test_cancel_discards_session_and_sets(client, day_id):
    session = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()
    logged = await _add_set(client, session["id"], 1, 10, 100)

    cancelled = (await client.post(f"{API}/sessions/active/cancel")).json()

    assert cancelled["id"] == session["id"]
    assert cancelled["status"] == "cancelled"
    assert (await client.get(f"{API}/sessions/{session['id']}")).status_code == 404
    assert (await client.get(f"{API}/sessions/active")).json() is None
    # the set went with the session
    response = await client.patch(
        f"{API}/sessions/{session['id']}/sets/{logged['id']}", json={"reps_performed": 1, "weight_used": 1}
    )
    assert response.status_code == 404
    assert (await client.post(f"{API}/sessions/active/cancel")).json() is None


async def test_update_set_keeps_completed_at(client, day_id):
    session = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()
    logged = await _add_set(client, session["id"], 1, 10, 100)

    response = await client.patch(
        f"{API}/sessions/{session['id']}/sets/{logged['id']}", json={"reps_performed": 12, "weight_used": 102.5}
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["id"] == logged["id"]
    assert updated["reps_performed"] == 12
    assert updated["weight_used"] == 102.5
    assert updated["exercise_name"] == "Bench Press"
    assert _naive(updated["completed_at"]) == _naive(logged["completed_at"])


async def test_set_validation_and_missing_session(client, day_id):
    session = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()

    bad = {"exercise_name": "Bench Press", "set_number": 0, "reps_performed": 5, "weight_used": 100}
    assert (await client.post(f"{API}/sessions/{session['id']}/sets", json=bad)).status_code == 422
    bad = {"exercise_name": "Bench Press", "set_number": 1, "reps_performed": -1, "weight_used": 100}
    assert (await client.post(f"{API}/sessions/{session['id']}/sets", json=bad)).status_code == 422

    bad = {"exercise_name": "   ", "set_number": 1, "reps_performed": 5, "weight_used": 100}
    assert (await client.post(f"{API}/sessions/{session['id']}/sets", json=bad)).status_code == 422

    ok = {"exercise_name": "Bench Press", "set_number": 1, "reps_performed": 5, "weight_used": 100}
    assert (await client.post(f"{API}/sessions/999/sets", json=ok)).status_code == 404


async def test_exercise_logs_and_delete_set(client, day_id):
    session = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()
    await _add_set(client, session["id"], 2, 8, 145)
    first = await _add_set(client, session["id"], 1, 10, 135)
    await _add_set(client, session["id"], 1, 5, 225, name="Deadlift")

    bench = (await client.get(f"{API}/sessions/{session['id']}/sets", params={"exercise_name": "Bench Press"})).json()
    assert [s["set_number"] for s in bench] == [1, 2]

    every = (await client.get(f"{API}/sessions/{session['id']}/sets")).json()
    assert [(s["exercise_name"], s["set_number"]) for s in every] == [
        ("Bench Press", 1),
        ("Bench Press", 2),
        ("Deadlift", 1),
    ]

    assert (await client.delete(f"{API}/sessions/sets/{first['id']}")).status_code == 204
    assert (await client.delete(f"{API}/sessions/sets/{first['id']}")).status_code == 204
    remaining = (await client.get(f"{API}/sessions/{session['id']}/sets")).json()
    assert len(remaining) == 2


async def test_history_and_recent(client, day_id):
    first = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()
    await client.post(f"{API}/sessions/active/end")
    second = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()

    history = (await client.get(f"{API}/sessions")).json()
    assert [s["id"] for s in history] == [second["id"], first["id"]]

    recent = (await client.get(f"{API}/sessions/recent", params={"limit": 5})).json()
    assert [s["id"] for s in recent] == [first["id"]]

    old = (
        await client.get(
            f"{API}/sessions",
            params={"from_date": "2000-01-01T00:00:00Z", "to_date": "2000-01-31T00:00:00Z"},
        )
    ).json()
    assert old == []


async def test_analytics_endpoints(client, day_id):
    session = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()
    await _add_set(client, session["id"], 1, 10, 135)
    await _add_set(client, session["id"], 2, 8, 145)
    await client.post(f"{API}/sessions/active/end")

    streak = (await client.get(f"{API}/analytics/streak")).json()
    assert streak == {"current_streak": 1, "timezone": "UTC"}

    weekly = (await client.get(f"{API}/analytics/weekly-volume", params={"weeks_back": 4})).json()
    assert weekly["weeks_back"] == 4
    assert sum(w["volume"] for w in weekly["weeks"]) == 1350.0 + 1160.0

    weights = (await client.get(f"{API}/analytics/last-weights", params={"exercise_name": "Bench Press"})).json()
    assert weights == {"exercise_name": "Bench Press", "weights": {"1": 135.0, "2": 145.0}}

    dashboard = (await client.get(f"{API}/analytics/dashboard")).json()
    assert dashboard["consecutive_days_streak"] == 1
    assert dashboard["workouts_this_month"] == 1
    assert dashboard["volume_this_month"] == 2510.0
    assert dashboard["favorite_routine_name"] == "Push"
    assert [s["id"] for s in dashboard["recent_sessions"]] == [session["id"]]


async def test_analytics_unknown_timezone_is_400(client):
    response = await client.get(f"{API}/analytics/streak", params={"tz": "Mars/Olympus_Mons"})
    assert response.status_code == 400


async def test_analytics_with_named_timezone(client):
    response = await client.get(f"{API}/analytics/dashboard", params={"tz": "America/New_York"})
    assert response.status_code == 200
    assert response.json()["timezone"] == "America/New_York"
    assert response.json()["consecutive_days_streak"] == 0


async def test_weight_is_stored_with_two_decimals(client, day_id):
    session = (await client.post(f"{API}/sessions/start", json={"routine_day_id": day_id})).json()

    logged = await _add_set(client, session["id"], 1, 10, 102.555)
    assert logged["weight_used"] == 102.56
    assert logged["volume"] == 1025.6

    updated = (
        await client.patch(
            f"{API}/sessions/{session['id']}/sets/{logged['id']}", json={"reps_performed": 10, "weight_used": 97.504}
        )
    ).json()
    assert updated["weight_used"] == 97.5

    stored = (await client.get(f"{API}/sessions/{session['id']}")).json()
    assert stored["set_logs"][0]["weight_used"] == updated["weight_used"]
    assert stored["total_volume"] == updated["volume"] == 975.0
