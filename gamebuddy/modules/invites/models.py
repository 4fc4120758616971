# Supabase tables: invite_codes, invite_redemptions (owned by the backend)
# Supabase RPCs: create_invite_code, redeem_invite, get_user_invite_stats
# This file documents the expected procedure surface
# Actual operations are handled via Supabase SDK in service.py

"""
Stored procedures (called with these argument names):

create_invite_code()
    -> text code, or a row with invite_code / code
    Issues a fresh code owned by auth.uid().

redeem_invite(invite_code_param)
    -> {success: bool, message: text, inviter_rewards?: int}
    Links the caller to the inviter and credits points to both
    (100 to the inviter, 50 to the new player). An unknown, used or
    own code yields success = false.

get_user_invite_stats(user_id_param)
    -> {total_invites, successful_invites, total_rewards}
"""
