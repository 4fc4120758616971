"""
Invite Rewards Configuration
Reward tiers shown on the invite stats panel and the points earned per referral.
Points themselves are accounted by the backend (redeem_invite / get_user_invite_stats);
this table only maps a point total to a tier.
"""

# Points credited by the backend
POINTS_PER_SUCCESSFUL_INVITE = 100
POINTS_FOR_JOINING_VIA_INVITE = 50

# Ordered lowest to highest; min_points is inclusive
REWARD_TIERS = [
    {
        "name": "Starter",
        "min_points": 0,
        "description": "Just getting started"
    },
    {
        "name": "Rising",
        "min_points": 200,
        "description": "Bringing friends onto the court"
    },
    {
        "name": "Pro",
        "min_points": 500,
        "description": "Priority matching unlocked"
    },
    {
        "name": "Champion",
        "min_points": 1000,
        "description": "Top of the referral ladder"
    },
]

REWARD_PERKS = [
    f"{POINTS_PER_SUCCESSFUL_INVITE} points per friend who joins",
    f"{POINTS_FOR_JOINING_VIA_INVITE} points for joining via invite",
    "Higher tiers get priority matching",
]


def get_reward_tier(points: int) -> dict:
    """Highest tier whose threshold the point total reaches"""
    current = REWARD_TIERS[0]
    for tier in REWARD_TIERS:
        if points >= tier["min_points"]:
            current = tier
    return current


def get_next_tier(points: int):
    """Next tier above the current one, or None at the top tier"""
    for tier in REWARD_TIERS:
        if points < tier["min_points"]:
            return tier
    return None


def get_tier_progress(points: int) -> float:
    """Percent progress toward the next tier's threshold, capped at 100"""
    next_tier = get_next_tier(points)
    if next_tier is None:
        return 100.0
    return min(100.0, max(points, 0) / next_tier["min_points"] * 100)
