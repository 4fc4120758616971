# Supabase tables read: conversations, messages
# This module replaces realtime channel subscriptions with a long poll
# over the same rows (see messaging/models.py for their structure)

"""
Change detection per poll, relative to the client's cursor ("since"):

- new messages:           messages.created_at > since in the player's conversations
- updated conversations:  conversations.last_message_at > since
- new conversations:      conversations.created_at > since
                          (a conversation is created exactly when a match turns
                          mutual, so these double as mutual-match notifications)

The returned cursor is the newest timestamp seen, never earlier than since.
"""
