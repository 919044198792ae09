"""Demo catalog: tags, hotels, sample users, reviews and follows.

Loaded once into an empty database so the app has something to show.
Catalog entries reference each other by short keys; real row ids are
generated at insert time.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hotelbook.ids import new_id
from hotelbook.models.follow import Follow
from hotelbook.models.hotel import Hotel, HotelTag
from hotelbook.models.profile import Profile
from hotelbook.models.review import Review

logger = logging.getLogger(__name__)

TAGS = {
    "luxury": "Luxury",
    "boutique": "Boutique",
    "eco": "Eco-Luxe",
    "heritage": "Heritage",
    "beach": "Beach Resort",
    "wellness": "Wellness",
    "design": "Design-Led",
    "coastal": "Coastal Chic",
}

HOTELS = [
    {
        "key": "ritz-paris",
        "name": "The Ritz Paris",
        "city": "Paris",
        "country": "France",
        "lat": 48.8682,
        "lng": 2.3282,
        "price_tier": "$$$$",
        "cover_image_url": "https://images.unsplash.com/photo-1551882547-ff40c63fe5fa?w=800",
        "description": "Legendary palace hotel on Place Vendôme, offering timeless luxury and impeccable French elegance since 1898.",
        "tags": ["luxury", "heritage"],
    },
    {
        "key": "aman-tokyo",
        "name": "Aman Tokyo",
        "city": "Tokyo",
        "country": "Japan",
        "lat": 35.6853,
        "lng": 139.7635,
        "price_tier": "$$$$",
        "cover_image_url": "https://images.unsplash.com/photo-1590073242678-70ee3fc28e8e?w=800",
        "description": "Urban sanctuary in Otemachi Tower with minimalist Japanese design and panoramic city views.",
        "tags": ["luxury", "design", "wellness"],
    },
    {
        "key": "soneva-fushi",
        "name": "Soneva Fushi",
        "city": "Baa Atoll",
        "country": "Maldives",
        "lat": 5.1108,
        "lng": 72.9553,
        "price_tier": "$$$$",
        "cover_image_url": "https://images.unsplash.com/photo-1573843981267-be1999ff37cd?w=800",
        "description": "Pioneering barefoot luxury resort with overwater villas and a no-shoes, no-news philosophy.",
        "tags": ["eco", "beach", "wellness"],
    },
    {
        "key": "claridges",
        "name": "Claridge's",
        "city": "London",
        "country": "United Kingdom",
        "lat": 51.5122,
        "lng": -0.1467,
        "price_tier": "$$$$",
        "cover_image_url": "https://images.unsplash.com/photo-1566073771259-6a8506099945?w=800",
        "description": "Art Deco masterpiece in Mayfair, beloved by royalty and celebrities for over a century.",
        "tags": ["luxury", "heritage"],
    },
    {
        "key": "zil-pasyon",
        "name": "Six Senses Zil Pasyon",
        "city": "Félicité Island",
        "country": "Seychelles",
        "lat": -4.3167,
        "lng": 55.8667,
        "price_tier": "$$$$",
        "cover_image_url": "https://images.unsplash.com/photo-1520250497591-112f2f40a3f4?w=800",
        "description": "Private island retreat with dramatic granite boulders and pristine beaches.",
        "tags": ["eco", "beach", "wellness"],
    },
    {
        "key": "hoxton-paris",
        "name": "The Hoxton, Paris",
        "city": "Paris",
        "country": "France",
        "lat": 48.8606,
        "lng": 2.3522,
        "price_tier": "$$",
        "cover_image_url": "https://images.unsplash.com/photo-1582719508461-905c673771fd?w=800",
        "description": "Hip hotel in a former 18th-century mansion in the 2nd arrondissement.",
        "tags": ["boutique", "design"],
    },
    {
        "key": "ace-kyoto",
        "name": "Ace Hotel Kyoto",
        "city": "Kyoto",
        "country": "Japan",
        "lat": 35.0012,
        "lng": 135.7659,
        "price_tier": "$$",
        "cover_image_url": "https://images.unsplash.com/photo-1578683010236-d716f9a3f461?w=800",
        "description": "Design-forward hotel blending industrial chic with traditional Japanese craft.",
        "tags": ["boutique", "design"],
    },
    {
        "key": "caruso",
        "name": "Belmond Hotel Caruso",
        "city": "Ravello",
        "country": "Italy",
        "lat": 40.6493,
        "lng": 14.6125,
        "price_tier": "$$$",
        "cover_image_url": "https://images.unsplash.com/photo-1564501049412-61c2a3083791?w=800",
        "description": "11th-century palazzo perched on the Amalfi Coast with an infinity pool overlooking the Mediterranean.",
        "tags": ["luxury", "heritage", "coastal"],
    },
    {
        "key": "the-brando",
        "name": "The Brando",
        "city": "Tetiaroa",
        "country": "French Polynesia",
        "lat": -17.0167,
        "lng": -149.5833,
        "price_tier": "$$$$",
        "cover_image_url": "https://images.unsplash.com/photo-1439130490301-25e322d88054?w=800",
        "description": "Carbon-neutral luxury resort on Marlon Brando's private island atoll.",
        "tags": ["eco", "beach"],
    },
    {
        "key": "singita",
        "name": "Singita Sabi Sand",
        "city": "Kruger",
        "country": "South Africa",
        "lat": -24.8333,
        "lng": 31.4167,
        "price_tier": "$$$$",
        "cover_image_url": "https://images.unsplash.com/photo-1493246507139-91e8fad9978e?w=800",
        "description": "Ultra-luxury safari lodge with exceptional Big Five game viewing.",
        "tags": ["luxury", "eco"],
    },
    {
        "key": "soho-barcelona",
        "name": "Soho House Barcelona",
        "city": "Barcelona",
        "country": "Spain",
        "lat": 41.3784,
        "lng": 2.1892,
        "price_tier": "$$",
        "cover_image_url": "https://images.unsplash.com/photo-1571896349842-33c89424de2d?w=800",
        "description": "Members club and hotel in the Gothic Quarter with rooftop pool.",
        "tags": ["boutique", "design"],
    },
    {
        "key": "castello-del-nero",
        "name": "Como Castello Del Nero",
        "city": "Tuscany",
        "country": "Italy",
        "lat": 43.5167,
        "lng": 11.2333,
        "price_tier": "$$$",
        "cover_image_url": "https://images.unsplash.com/photo-1445019980597-93fa8acb246c?w=800",
        "description": "12th-century castle estate in the Chianti hills with destination spa.",
        "tags": ["heritage", "wellness"],
    },
]

USERS = [
    {
        "key": "jane",
        "username": "traveljane",
        "full_name": "Jane Thompson",
        "bio": "Luxury travel blogger. 50+ countries. Collecting sunsets and room service.",
        "home_city": "New York",
    },
    {
        "key": "marco",
        "username": "marcowanders",
        "full_name": "Marco Ricci",
        "bio": "Hotel enthusiast and architecture lover.",
        "home_city": "Milan",
    },
    {
        "key": "sarah",
        "username": "sarahexplores",
        "full_name": "Sarah Chen",
        "bio": "Seeking the perfect hotel experience, one stay at a time.",
        "home_city": "San Francisco",
    },
]

REVIEWS = [
    {
        "user": "jane",
        "hotel": "ritz-paris",
        "rating_overall": 5,
        "rating_aesthetic": 5,
        "rating_service": 5,
        "rating_amenities": 5,
        "title": "Pure magic in the heart of Paris",
        "body": "The Ritz Paris exceeded every expectation. From the moment we arrived, we were treated like royalty. The Coco Chanel suite was breathtaking, and the attention to detail throughout was impeccable. The Bar Hemingway is a must-visit.",
        "trip_type": "honeymoon",
    },
    {
        "user": "marco",
        "hotel": "aman-tokyo",
        "rating_overall": 5,
        "rating_aesthetic": 5,
        "rating_service": 4,
        "rating_amenities": 5,
        "title": "Zen in the sky",
        "body": "Aman Tokyo is a masterclass in minimalist luxury. The ryokan-inspired design creates an oasis of calm above the bustling city. The spa is transcendent, and the kaiseki at the restaurant was one of the best meals of my life.",
        "trip_type": "solo",
    },
    {
        "user": "sarah",
        "hotel": "soneva-fushi",
        "rating_overall": 5,
        "rating_aesthetic": 5,
        "rating_service": 5,
        "rating_amenities": 4,
        "title": "Paradise found",
        "body": "Soneva Fushi is the ultimate escape. No shoes, no news, just pure bliss. The overwater villa was stunning, and the stargazing dinner was unforgettable. Already planning our return.",
        "trip_type": "couples",
    },
    {
        "user": "jane",
        "hotel": "caruso",
        "rating_overall": 5,
        "rating_aesthetic": 5,
        "rating_service": 5,
        "rating_amenities": 4,
        "title": "Italian dreams come true",
        "body": "Waking up to views of the Amalfi Coast from our terrace was surreal. The infinity pool is even more stunning in person. The staff remembered every preference. True Italian hospitality.",
        "trip_type": "couples",
    },
    {
        "user": "marco",
        "hotel": "hoxton-paris",
        "rating_overall": 4,
        "rating_aesthetic": 5,
        "rating_service": 4,
        "rating_amenities": 4,
        "title": "Cool and comfortable",
        "body": "The Hoxton perfectly balances style and value. Love the design aesthetic and the location is unbeatable. The lobby is always buzzing with a great crowd. Perfect for a design-forward Paris trip.",
        "trip_type": "work",
    },
]

# (follower, following)
FOLLOWS = [
    ("jane", "marco"),
    ("jane", "sarah"),
    ("marco", "jane"),
]


async def seed_database(db: AsyncSession) -> bool:
    """Load the demo catalog unless the database already has hotels.

    Returns True if the catalog was inserted.
    """
    existing = (await db.execute(select(func.count(Hotel.id)))).scalar() or 0
    if existing > 0:
        logger.info("Database already seeded")
        return False

    logger.info("Seeding database...")

    tags = {key: HotelTag(id=new_id(), name=name) for key, name in TAGS.items()}
    db.add_all(tags.values())

    hotel_ids = {}
    for data in HOTELS:
        fields = {k: v for k, v in data.items() if k not in ("key", "tags")}
        hotel = Hotel(id=new_id(), **fields)
        hotel.tags = [tags[key] for key in data["tags"]]
        db.add(hotel)
        hotel_ids[data["key"]] = hotel.id

    user_ids = {}
    for data in USERS:
        fields = {k: v for k, v in data.items() if k != "key"}
        profile = Profile(id=new_id(), **fields)
        db.add(profile)
        user_ids[data["key"]] = profile.id

    # Profiles and hotels must exist before rows that reference them
    await db.flush()

    for data in REVIEWS:
        fields = {k: v for k, v in data.items() if k not in ("user", "hotel")}
        db.add(Review(user_id=user_ids[data["user"]], hotel_id=hotel_ids[data["hotel"]], **fields))

    for follower, following in FOLLOWS:
        db.add(Follow(follower_id=user_ids[follower], following_id=user_ids[following]))

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info(
        f"Seeded {len(TAGS)} tags, {len(HOTELS)} hotels, {len(USERS)} users, "
        f"{len(REVIEWS)} reviews, {len(FOLLOWS)} follows"
    )
    return True
