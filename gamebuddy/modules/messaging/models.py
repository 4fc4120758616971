# Supabase tables: conversations, messages
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

conversations:
- id: uuid (primary key)
- match_id: uuid (foreign key to matches.id) - the mutual match that opened it
- user1_id: uuid (foreign key to profiles.id)
- user2_id: uuid (foreign key to profiles.id)
- last_message_at: timestamp (default: now()) - bumped on every send
- created_at: timestamp (default: now())

Conversations are created by handle_mutual_match, never by the API directly.

messages:
- id: uuid (primary key)
- conversation_id: uuid (foreign key to conversations.id, on delete cascade)
- sender_id: uuid (foreign key to profiles.id)
- content: text (not null, 1..2000 chars after trimming)
- created_at: timestamp (default: now())
"""
