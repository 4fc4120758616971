# Supabase tables: profiles, user_sports, user_preferences
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, references auth.users.id)
- name: text (not null)
- age: integer (nullable)
- gender: gender_type (nullable) - values: male, female, non_binary, prefer_not_to_say
- bio: text (nullable)
- location: text (nullable) - display name, e.g. "Austin, TX"
- latitude: numeric (nullable)
- longitude: numeric (nullable)
- profile_photo_url: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

user_sports:
- id: uuid (primary key)
- user_id: uuid (foreign key to profiles.id)
- sport: sport_type (not null) - tennis, pickleball, basketball, badminton, squash, racquetball
- skill_level: skill_level (not null) - beginner, intermediate, advanced, expert
- created_at: timestamp (default: now())

user_preferences:
- id: uuid (primary key)
- user_id: uuid (foreign key to profiles.id, one row per user)
- age_range_min: integer (nullable)
- age_range_max: integer (nullable)
- gender_preference: gender_type[] (nullable)
- max_travel_distance: integer (nullable) - miles
- frequency: frequency (nullable) - 1_2_per_week, 3_4_per_week, daily, flexible
- preferred_days: integer[] (nullable) - 0 = Sunday ... 6 = Saturday
- preferred_time_slots: time_slot[] (nullable) - morning, afternoon, evening
- venue_types: venue_type[] (nullable) - public_free, private_club, paid_facility, home_court
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
