from tests.conftest import USER_ID, OTHER_ID, call_args


def _payload(**overrides):
    payload = {
        "profile": {
            "name": "  Alex Smith ",
            "age": 30,
            "gender": "male",
            "location": "Austin, TX",
            "bio": "Tennis most weekends",
            "latitude": 30.2672,
            "longitude": -97.7431,
        },
        "sports": [{"sport": "tennis", "skill_level": "intermediate"}],
        "preferences": {
            "preferred_days": [0, 6],
            "preferred_time_slots": ["morning"],
            "frequency": "1_2_per_week",
            "venue_types": ["public_free"],
            "max_travel_distance": 15,
            "age_range_min": 25,
            "age_range_max": 40,
            "gender_preference": ["female", "male"],
        },
    }
    payload.update(overrides)
    return payload


def test_save_profile_requires_name(client, fake_supabase):
    payload = _payload()
    payload["profile"]["name"] = "   "
    response = client.put("/api/v1/profiles/me", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter your name"
    assert fake_supabase.executed == []


def test_save_profile_requires_a_sport(client, fake_supabase):
    response = client.put("/api/v1/profiles/me", json=_payload(sports=[]))
    assert response.status_code == 400
    assert response.json()["detail"] == "Please add at least one sport"
    assert fake_supabase.executed == []


def test_save_profile_rejects_incomplete_sport(client, fake_supabase):
    sports = [
        {"sport": "tennis", "skill_level": "advanced"},
        {"sport": "squash", "skill_level": ""},
    ]
    response = client.put("/api/v1/profiles/me", json=_payload(sports=sports))
    assert response.status_code == 400
    assert response.json()["detail"] == \
        "Please ensure all sports have both sport type and skill level selected"
    assert fake_supabase.executed == []


def test_save_profile_rejects_inverted_age_range(client, fake_supabase):
    payload = _payload()
    payload["preferences"]["age_range_min"] = 50
    payload["preferences"]["age_range_max"] = 30
    response = client.put("/api/v1/profiles/me", json=payload)
    assert response.status_code == 400
    assert fake_supabase.executed == []


def test_save_profile_rejects_unknown_day(client, fake_supabase):
    payload = _payload()
    payload["preferences"]["preferred_days"] = [7]
    response = client.put("/api/v1/profiles/me", json=payload)
    assert response.status_code == 422


def test_save_profile_replaces_sports_and_inserts_preferences(client, fake_supabase):
    fake_supabase.queue("profiles", [{"id": USER_ID, "name": "Alex Smith", "age": 30}])
    fake_supabase.queue("user_preferences", [])

    response = client.put("/api/v1/profiles/me", json=_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["is_complete"] is True
    assert body["profile"]["name"] == "Alex Smith"
    assert body["sports"] == [{"sport": "tennis", "skill_level": "intermediate"}]
    assert body["preferences"]["preferred_days"] == [0, 6]

    assert fake_supabase.executed_keys() == [
        "profiles", "user_sports", "user_sports", "user_preferences", "user_preferences"
    ]
    upsert = call_args(fake_supabase.calls_for("profiles")[0], "upsert")[0][0]
    assert upsert["id"] == USER_ID
    assert upsert["name"] == "Alex Smith"
    assert "profile_photo_url" not in upsert

    delete_calls, insert_calls = fake_supabase.calls_for("user_sports")
    assert call_args(delete_calls, "eq") == [("user_id", USER_ID)]
    inserted = call_args(insert_calls, "insert")[0][0]
    assert inserted == [{"user_id": USER_ID, "sport": "tennis", "skill_level": "intermediate"}]

    prefs_insert = call_args(fake_supabase.calls_for("user_preferences")[1], "insert")[0][0]
    assert prefs_insert["user_id"] == USER_ID
    assert prefs_insert["frequency"] == "1_2_per_week"


def test_save_profile_updates_existing_preferences(client, fake_supabase):
    fake_supabase.queue("profiles", [{"id": USER_ID, "name": "Alex Smith"}])
    fake_supabase.queue("user_preferences", [{"id": "pref-1"}])

    response = client.put("/api/v1/profiles/me", json=_payload())

    assert response.status_code == 200
    update_calls = fake_supabase.calls_for("user_preferences")[1]
    assert len(call_args(update_calls, "update")) == 1
    assert call_args(update_calls, "insert") == []


def test_get_my_profile_without_rows_returns_defaults(client, fake_supabase):
    fake_supabase.queue("profiles", None)
    fake_supabase.queue("user_preferences", None)

    response = client.get("/api/v1/profiles/me")

    assert response.status_code == 200
    body = response.json()
    assert body["profile"] is None
    assert body["sports"] == []
    assert body["is_complete"] is False
    assert body["preferences"]["frequency"] == "flexible"
    assert body["preferences"]["max_travel_distance"] == 10


def test_get_my_profile_complete(client, fake_supabase):
    fake_supabase.queue("profiles", {"id": USER_ID, "name": "Alex", "age": 30})
    fake_supabase.queue("user_sports", [{"sport": "pickleball", "skill_level": "beginner"}])
    fake_supabase.queue("user_preferences", {"preferred_days": [1, 3], "frequency": "daily"})

    body = client.get("/api/v1/profiles/me").json()

    assert body["is_complete"] is True
    assert body["preferences"]["preferred_days"] == [1, 3]
    assert body["preferences"]["frequency"] == "daily"


def test_public_profile_not_found(client, fake_supabase):
    fake_supabase.queue("profiles", None)
    response = client.get(f"/api/v1/profiles/{OTHER_ID}")
    assert response.status_code == 404
    assert response.json()["detail"] == "Profile not found"


def test_public_profile_includes_sports(client, fake_supabase):
    fake_supabase.queue("profiles", {"id": OTHER_ID, "name": "Bo", "age": 28, "location": "Austin, TX"})
    fake_supabase.queue("user_sports", [
        {"user_id": OTHER_ID, "sport": "tennis", "skill_level": "expert"},
        {"user_id": OTHER_ID, "sport": "squash", "skill_level": "beginner"},
    ])

    body = client.get(f"/api/v1/profiles/{OTHER_ID}").json()

    assert body["name"] == "Bo"
    assert [s["sport"] for s in body["sports"]] == ["tennis", "squash"]


def test_backend_failure_becomes_500(client, fake_supabase):
    fake_supabase.queue("profiles", error=RuntimeError("connection reset"))
    response = client.get("/api/v1/profiles/me")
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to load profile data"


def test_travel_distance_is_documented_in_miles():
    from gamebuddy.modules.profiles.schemas import PreferencesData, PreferencesResponse

    request_field = PreferencesData.model_json_schema()["properties"]["max_travel_distance"]
    response_field = PreferencesResponse.model_json_schema()["properties"]["max_travel_distance"]

    assert "miles" in request_field["description"].lower()
    assert "miles" in response_field["description"].lower()
