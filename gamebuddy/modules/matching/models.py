# Supabase table: matches
# Supabase RPCs: get_potential_matches, handle_mutual_match, reset_all_matches
# This file documents the expected database schema and procedure surface
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

matches:
- id: uuid (primary key)
- user1_id: uuid (foreign key to profiles.id) - the player who liked first
- user2_id: uuid (foreign key to profiles.id) - the liked player
- sport: sport_type (not null)
- is_mutual: boolean (default: false) - set when the like is reciprocated
- created_at: timestamp (default: now())

Stored procedures (owned by the backend, called with these argument names):

get_potential_matches(user_latitude, user_longitude, max_distance_km, limit_count)
    -> setof profile rows (id, name, age, profile_photo_url, location, bio[, distance_km])
    Excludes the caller and players the caller already liked. Null coordinates
    disable the distance bound.

handle_mutual_match(current_user_id, target_user_id, sport_name)
    -> records the like; when the target already liked the caller the match is
       promoted to mutual and its conversation is created atomically.

reset_all_matches()
    -> deletes messages, conversations and matches in dependency order.
"""
