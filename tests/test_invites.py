from urllib.parse import quote, unquote

import pytest

from gamebuddy.config.rewards_config import get_reward_tier, get_next_tier, get_tier_progress
from gamebuddy.modules.invites.service import parse_invite_code
from tests.conftest import USER_ID


@pytest.mark.parametrize("points, tier", [
    (0, "Starter"),
    (199, "Starter"),
    (200, "Rising"),
    (499, "Rising"),
    (500, "Pro"),
    (999, "Pro"),
    (1000, "Champion"),
    (4200, "Champion"),
])
def test_reward_tier_thresholds(points, tier):
    assert get_reward_tier(points)["name"] == tier


def test_next_tier_and_progress():
    assert get_next_tier(0)["name"] == "Rising"
    assert get_tier_progress(100) == 50.0
    assert get_tier_progress(250) == 50.0
    assert get_next_tier(1000) is None
    assert get_tier_progress(1000) == 100.0
    assert get_tier_progress(5000) == 100.0


@pytest.mark.parametrize("data, expected", [
    ("GB7XK2", "GB7XK2"),
    ({"invite_code": "GB7XK2"}, "GB7XK2"),
    ([{"code": "GB7XK2"}], "GB7XK2"),
    ([], None),
    (None, None),
])
def test_parse_invite_code(data, expected):
    assert parse_invite_code(data) == expected


def test_create_invite_builds_share_links(client, fake_supabase):
    fake_supabase.queue("rpc:create_invite_code", "GB7XK2")

    response = client.post("/api/v1/invites")

    assert response.status_code == 201
    body = response.json()
    assert body["invite_code"] == "GB7XK2"
    assert body["invite_link"] == "http://localhost:5173/?ref=GB7XK2"
    assert body["share_message"] == (
        "Join me on GameBuddy! Find your perfect sports partner for tennis, pickleball, "
        "basketball, and more. http://localhost:5173/?ref=GB7XK2"
    )
    assert body["email_link"].startswith("mailto:?subject=Join%20me%20on%20GameBuddy%21&body=")
    assert unquote(body["email_link"].split("&body=", 1)[1]) == body["share_message"]
    assert body["sms_link"] == "sms:?body=" + quote(body["share_message"])
    assert " " not in body["sms_link"]
    assert fake_supabase.rpc_calls == [("create_invite_code", {})]


def test_create_invite_without_code_is_500(client, fake_supabase):
    fake_supabase.queue("rpc:create_invite_code", None)
    response = client.post("/api/v1/invites")
    assert response.status_code == 500


def test_redeem_passes_trimmed_code(client, fake_supabase):
    fake_supabase.queue("rpc:redeem_invite", {
        "success": True, "message": "Welcome! You earned 50 points.", "inviter_rewards": 100
    })

    response = client.post("/api/v1/invites/redeem", json={"invite_code": "  GB7XK2 "})

    assert response.status_code == 200
    assert response.json() == {
        "success": True, "message": "Welcome! You earned 50 points.", "inviter_rewards": 100
    }
    assert fake_supabase.rpc_calls == [("redeem_invite", {"invite_code_param": "GB7XK2"})]


def test_rejected_code_is_not_an_http_error(client, fake_supabase):
    fake_supabase.queue("rpc:redeem_invite", [{"success": False, "message": "Invite code already used"}])

    response = client.post("/api/v1/invites/redeem", json={"invite_code": "USED01"})

    assert response.status_code == 200
    assert response.json()["success"] is False
    assert response.json()["message"] == "Invite code already used"


def test_redeem_blank_code_is_422(client, fake_supabase):
    response = client.post("/api/v1/invites/redeem", json={"invite_code": "   "})
    assert response.status_code == 422
    assert fake_supabase.rpc_calls == []


def test_stats_with_tier_progress(client, fake_supabase):
    fake_supabase.queue("rpc:get_user_invite_stats", [
        {"total_invites": 4, "successful_invites": 2, "total_rewards": 250}
    ])

    body = client.get("/api/v1/invites/stats").json()

    assert fake_supabase.rpc_calls == [("get_user_invite_stats", {"user_id_param": USER_ID})]
    assert body["successful_invites"] == 2
    assert body["tier"]["name"] == "Rising"
    assert body["next_tier"]["name"] == "Pro"
    assert body["next_tier_target"] == 500
    assert body["progress_percent"] == 50.0


def test_stats_at_top_tier(client, fake_supabase):
    fake_supabase.queue("rpc:get_user_invite_stats", {"total_invites": 20, "successful_invites": 12, "total_rewards": 1200})

    body = client.get("/api/v1/invites/stats").json()

    assert body["tier"]["name"] == "Champion"
    assert body["next_tier"] is None
    assert body["next_tier_target"] is None
    assert body["progress_percent"] == 100.0


def test_stats_without_row_default_to_zero(client, fake_supabase):
    body = client.get("/api/v1/invites/stats").json()
    assert body["total_rewards"] == 0
    assert body["tier"]["name"] == "Starter"
    assert body["progress_percent"] == 0.0
