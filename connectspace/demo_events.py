"""Demo events used to seed a wishlist that has never been stored."""

from __future__ import annotations

from typing import List

from connectspace.schemas import Event

_PLACEHOLDER_IMAGE = "/placeholder.svg?height=300&width=500"

_RAW_DEMO_EVENTS = [
    {
        "id": 1,
        "title": "AI & Machine Learning Summit 2024",
        "description": (
            "Join industry leaders and researchers for a comprehensive exploration of the latest "
            "advances in artificial intelligence and machine learning, with keynotes, hands-on "
            "workshops and networking."
        ),
        "date": "2024-02-15",
        "time": "9:00 AM",
        "endTime": "6:00 PM",
        "location": "San Francisco Convention Center, CA",
        "category": "Technology",
        "price": 299,
        "organizer": "Tech Innovators Hub",
        "attendees": 847,
        "maxAttendees": 1000,
        "tags": ["AI", "Machine Learning", "Technology", "Networking", "Innovation"],
        "featured": True,
        "communityId": 1,
        "communityName": "Tech Innovators",
    },
    {
        "id": 2,
        "title": "Sustainable Living Workshop",
        "description": (
            "Practical strategies for reducing your environmental footprint: eco-friendly home "
            "solutions, sustainable fashion and green technology adoption."
        ),
        "date": "2024-02-08",
        "time": "2:00 PM",
        "endTime": "5:00 PM",
        "location": "Green Community Center, Portland, OR",
        "category": "Environment",
        "price": 0,
        "organizer": "EcoLife Community",
        "attendees": 156,
        "maxAttendees": 200,
        "tags": ["Sustainability", "Environment", "Workshop", "Green Living", "Community"],
        "featured": False,
        "communityId": 2,
        "communityName": "Eco Warriors",
    },
    {
        "id": 3,
        "title": "Digital Art & NFT Creation Masterclass",
        "description": (
            "Digital painting techniques, blockchain basics and the business side of selling "
            "digital art."
        ),
        "date": "2024-02-22",
        "time": "10:00 AM",
        "endTime": "4:00 PM",
        "location": "Creative Arts Studio, Brooklyn, NY",
        "category": "Creative",
        "price": 150,
        "organizer": "Digital Artists Collective",
        "attendees": 89,
        "maxAttendees": 120,
        "tags": ["Digital Art", "NFT", "Blockchain", "Creative", "Masterclass"],
        "featured": True,
        "communityId": 3,
        "communityName": "Creative Minds",
    },
    {
        "id": 4,
        "title": "Startup Pitch Competition & Networking",
        "description": (
            "Startups pitch to a panel of investors and industry experts, followed by networking "
            "and live entertainment."
        ),
        "date": "2024-03-05",
        "time": "6:00 PM",
        "endTime": "10:00 PM",
        "location": "Innovation Hub, Austin, TX",
        "category": "Business",
        "price": 75,
        "organizer": "Startup Austin",
        "attendees": 234,
        "maxAttendees": 300,
        "tags": ["Startup", "Pitch", "Networking", "Investment", "Innovation"],
        "featured": False,
        "communityId": 4,
        "communityName": "Startup Founders",
    },
    {
        "id": 5,
        "title": "Mindfulness & Meditation Retreat",
        "description": (
            "A day of meditation techniques and yoga in a quiet natural setting."
        ),
        "date": "2024-03-12",
        "time": "8:00 AM",
        "endTime": "6:00 PM",
        "location": "Mountain View Retreat Center, Sedona, AZ",
        "category": "Wellness",
        "price": 120,
        "organizer": "Mindful Living Institute",
        "attendees": 67,
        "maxAttendees": 80,
        "tags": ["Mindfulness", "Meditation", "Wellness", "Retreat", "Self-care"],
        "featured": True,
        "communityId": 5,
        "communityName": "Wellness Warriors",
    },
    {
        "id": 6,
        "title": "Food & Wine Pairing Experience",
        "description": (
            "Locally sourced dishes paired with premium wines, led by a chef and a sommelier."
        ),
        "date": "2024-02-28",
        "time": "7:00 PM",
        "endTime": "10:00 PM",
        "location": "The Culinary Institute, Napa Valley, CA",
        "category": "Food & Drink",
        "price": 185,
        "organizer": "Gourmet Society",
        "attendees": 45,
        "maxAttendees": 60,
        "tags": ["Food", "Wine", "Culinary", "Pairing", "Gourmet"],
        "featured": False,
        "communityId": 6,
        "communityName": "Food Enthusiasts",
    },
    {
        "id": 7,
        "title": "Photography Walk: Urban Landscapes",
        "description": (
            "A guided walk covering composition, lighting and post-processing basics."
        ),
        "date": "2024-02-18",
        "time": "6:00 AM",
        "endTime": "10:00 AM",
        "location": "Downtown Seattle, WA",
        "category": "Photography",
        "price": 0,
        "organizer": "Seattle Photo Club",
        "attendees": 28,
        "maxAttendees": 35,
        "tags": ["Photography", "Urban", "Walk", "Landscape", "Tutorial"],
        "featured": False,
        "communityId": 7,
        "communityName": "Photo Enthusiasts",
    },
    {
        "id": 8,
        "title": "Blockchain & Cryptocurrency Workshop",
        "description": (
            "Blockchain platforms, smart contracts and DeFi protocols explained by practitioners."
        ),
        "date": "2024-03-20",
        "time": "1:00 PM",
        "endTime": "6:00 PM",
        "location": "Tech Campus, Miami, FL",
        "category": "Technology",
        "price": 199,
        "organizer": "Crypto Education Hub",
        "attendees": 156,
        "maxAttendees": 200,
        "tags": ["Blockchain", "Cryptocurrency", "DeFi", "Technology", "Investment"],
        "featured": True,
        "communityId": 1,
        "communityName": "Tech Innovators",
    },
    {
        "id": 9,
        "title": "Community Garden Volunteer Day",
        "description": (
            "Plant seasonal vegetables, maintain plots and learn sustainable gardening."
        ),
        "date": "2024-02-10",
        "time": "9:00 AM",
        "endTime": "3:00 PM",
        "location": "Riverside Community Garden, Denver, CO",
        "category": "Community Service",
        "price": 0,
        "organizer": "Green Thumb Volunteers",
        "attendees": 42,
        "maxAttendees": 50,
        "tags": ["Volunteering", "Gardening", "Community", "Environment", "Service"],
        "featured": False,
        "communityId": 2,
        "communityName": "Eco Warriors",
    },
    {
        "id": 10,
        "title": "Jazz Night at The Blue Note",
        "description": (
            "Live jazz from local and touring musicians with craft cocktails."
        ),
        "date": "2024-03-08",
        "time": "8:00 PM",
        "endTime": "11:00 PM",
        "location": "The Blue Note Jazz Club, New Orleans, LA",
        "category": "Music",
        "price": 45,
        "organizer": "Jazz Appreciation Society",
        "attendees": 78,
        "maxAttendees": 100,
        "tags": ["Jazz", "Music", "Live Performance", "Cocktails", "Culture"],
        "featured": False,
        "communityId": 8,
        "communityName": "Music Lovers",
    },
]

DEMO_EVENTS: List[Event] = [
    Event.model_validate({**raw, "image": _PLACEHOLDER_IMAGE}) for raw in _RAW_DEMO_EVENTS
]

DEFAULT_BOOTSTRAP_SIZE = 5


def bootstrap_sample(size: int = DEFAULT_BOOTSTRAP_SIZE) -> List[Event]:
    """Return the first ``size`` demo events (clamped to the dataset)."""

    size = max(0, min(size, len(DEMO_EVENTS)))
    return list(DEMO_EVENTS[:size])


__all__ = ["DEMO_EVENTS", "DEFAULT_BOOTSTRAP_SIZE", "bootstrap_sample"]
