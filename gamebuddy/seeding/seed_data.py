"""
Seed Data
Name pools, cities, bios and photos used to generate synthetic players
for local development and demos.
"""

FIRST_NAMES = {
    "male": [
        "Alex", "Ben", "Chris", "David", "Ethan", "Felix", "Gabriel", "Henry", "Ian", "Jack",
        "Kevin", "Liam", "Michael", "Nathan", "Oliver", "Paul", "Quinn", "Ryan", "Sam", "Tom",
        "Victor", "William", "Xavier", "Yuki", "Zach", "Adam", "Blake", "Connor", "Daniel", "Eric",
    ],
    "female": [
        "Alice", "Bella", "Claire", "Diana", "Emma", "Fiona", "Grace", "Hannah", "Iris", "Julia",
        "Kate", "Luna", "Maya", "Nina", "Olivia", "Paige", "Quinn", "Rachel", "Sarah", "Tara",
        "Uma", "Violet", "Wendy", "Xara", "Yasmin", "Zoe", "Aria", "Brooke", "Chloe", "Delia",
    ],
    # Also used for prefer_not_to_say
    "non_binary": [
        "Avery", "Bailey", "Casey", "Drew", "Emery", "Finley", "Gray", "Harper", "Indigo", "Jordan",
        "Kai", "Logan", "Morgan", "Nova", "Oakley", "Parker", "River", "Sage", "Taylor", "Unity",
        "Vale", "Winter", "Xen", "Yael", "Zen",
    ],
}

LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
    "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin",
    "Lee", "Perez", "Thompson", "White", "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson",
]

CITIES = [
    {"name": "New York, NY", "lat": 40.7128, "lng": -74.0060},
    {"name": "Los Angeles, CA", "lat": 34.0522, "lng": -118.2437},
    {"name": "Chicago, IL", "lat": 41.8781, "lng": -87.6298},
    {"name": "Houston, TX", "lat": 29.7604, "lng": -95.3698},
    {"name": "Phoenix, AZ", "lat": 33.4484, "lng": -112.0740},
    {"name": "Philadelphia, PA", "lat": 39.9526, "lng": -75.1652},
    {"name": "San Antonio, TX", "lat": 29.4241, "lng": -98.4936},
    {"name": "San Diego, CA", "lat": 32.7157, "lng": -117.1611},
    {"name": "Dallas, TX", "lat": 32.7767, "lng": -96.7970},
    {"name": "San Jose, CA", "lat": 37.3382, "lng": -121.8863},
    {"name": "Austin, TX", "lat": 30.2672, "lng": -97.7431},
    {"name": "Jacksonville, FL", "lat": 30.3322, "lng": -81.6557},
    {"name": "Fort Worth, TX", "lat": 32.7555, "lng": -97.3308},
    {"name": "Columbus, OH", "lat": 39.9612, "lng": -82.9988},
    {"name": "Charlotte, NC", "lat": 35.2271, "lng": -80.8431},
    {"name": "San Francisco, CA", "lat": 37.7749, "lng": -122.4194},
    {"name": "Indianapolis, IN", "lat": 39.7684, "lng": -86.1581},
    {"name": "Seattle, WA", "lat": 47.6062, "lng": -122.3321},
    {"name": "Denver, CO", "lat": 39.7392, "lng": -104.9903},
    {"name": "Boston, MA", "lat": 42.3601, "lng": -71.0589},
]

BIO_TEMPLATES = [
    "Love playing {sport}! Looking for someone to hit the courts with. When I'm not playing, "
    "you can find me exploring new restaurants or hiking trails.",
    "Passionate {sport} player seeking a fun partner to improve my game. I enjoy good coffee, "
    "live music, and weekend adventures.",
    "Been playing {sport} for {years} years and always looking to meet new people on the court. "
    "Big fan of outdoor activities and trying new cuisines.",
    "{sport} enthusiast who believes in work-life balance. Love to travel, read, and catch up "
    "with friends over a good game.",
    "Competitive {sport} player looking for someone who shares my passion for the sport. "
    "Also enjoy cooking, movies, and exploring the city.",
    "Just started playing {sport} and loving every minute of it! Looking for patient partners "
    "to learn and have fun with.",
    "Weekend warrior on the {sport} court. When not playing, I'm probably at a brewery, "
    "watching sports, or planning my next vacation.",
    "{sport} is my stress relief after long work days. Would love to find a regular playing "
    "partner who enjoys good conversation too.",
    "Lifelong {sport} player who loves the competitive spirit and social aspect of the game. "
    "Always up for post-game drinks!",
    "New to the area and looking to meet people through {sport}. I'm friendly, reliable, "
    "and always bring good energy to the court.",
]

PROFILE_PHOTOS = [
    "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=400&h=400&fit=crop&crop=face",
    "https://images.unsplash.com/photo-1494790108755-2616b612b5bc?w=400&h=400&fit=crop&crop=face",
    "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?w=400&h=400&fit=crop&crop=face",
    "https://images.unsplash.com/photo-1534528741775-53994a69daeb?w=400&h=400&fit=crop&crop=face",
    "https://images.unsplash.com/photo-1506794778202-cad84cf45f1d?w=400&h=400&fit=crop&crop=face",
    "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=400&h=400&fit=crop&crop=face",
    "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=400&h=400&fit=crop&crop=face",
    "https://images.unsplash.com/photo-1544723795-3fb6469f5b39?w=400&h=400&fit=crop&crop=face",
    "https://images.unsplash.com/photo-1552058544-f2b08422138a?w=400&h=400&fit=crop&crop=face",
    "https://images.unsplash.com/photo-1517841905240-472988babdf9?w=400&h=400&fit=crop&crop=face",
]

TRAVEL_DISTANCES = [5, 10, 15, 20, 25, 30]

# City coordinates are jittered by up to this many degrees in each axis
LOCATION_JITTER_DEGREES = 0.5

MIN_AGE = 18
MAX_AGE = 65
