# Supabase Auth
# Sign-up, sign-in and token validation are delegated to Supabase Auth.
# No custom tables are required for authentication itself.

"""
Supabase Auth provides:
- auth.sign_up() - Register new players (on a throwaway client)
- auth.sign_in_with_password() - Authenticate players (on a throwaway client)
- auth.get_user() - Resolve the current player from a JWT
- auth.admin.sign_out(jwt) - Logout, revoking only the given token

The player's display name is stored in user_metadata["name"] at sign-up.
Admin players carry app_metadata["type"] == "admin" (set server-side only).
The public profile lives in the `profiles` table, keyed by the auth user id
(see modules/profiles/models.py).
"""
