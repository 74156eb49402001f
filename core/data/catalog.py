# Sample marketplace catalog
# Nine categories, five vendors and eighteen services.
# Used as the default catalog and as seed data for a fresh Supabase project.
# Prices are whole Naira.

from core.models.catalog import Category, Service, Vendor

CATEGORY_ROWS = [
    {"id": "weddings",     "name": "Weddings",     "icon": "💍", "description": "Complete wedding planning & services"},
    {"id": "birthdays",    "name": "Birthdays",    "icon": "🎂", "description": "Birthday party packages & supplies"},
    {"id": "corporate",    "name": "Corporate",    "icon": "🏢", "description": "Professional corporate events"},
    {"id": "baby-showers", "name": "Baby Showers", "icon": "👶", "description": "Beautiful baby shower setups"},
    {"id": "concerts",     "name": "Concerts",     "icon": "🎤", "description": "Live entertainment & sound"},
    {"id": "catering",     "name": "Catering",     "icon": "🍽️", "description": "Gourmet food & beverages"},
    {"id": "decorations",  "name": "Decorations",  "icon": "🎨", "description": "Stunning event décor"},
    {"id": "photography",  "name": "Photography",  "icon": "📸", "description": "Professional photo & video"},
    {"id": "rentals",      "name": "Rentals",      "icon": "🪑", "description": "Equipment & furniture rentals"},
]

VENDOR_ROWS = [
    {
        "id": "v1",
        "name": "Elegance Events",
        "specialty": "Wedding Planning",
        "bio": "Award-winning wedding planners with 15+ years of experience creating unforgettable celebrations.",
        "avatar": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?w=200",
        "rating": 4.9,
        "review_count": 234,
        "location": "Lagos, Nigeria",
        "verified": True,
    },
    {
        "id": "v2",
        "name": "Divine Catering Co.",
        "specialty": "Catering Services",
        "bio": "Premium catering services specializing in African and Continental cuisines.",
        "avatar": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?w=200",
        "rating": 4.8,
        "review_count": 189,
        "location": "Abuja, Nigeria",
        "verified": True,
    },
    {
        "id": "v3",
        "name": "Pixel Perfect Studios",
        "specialty": "Photography & Video",
        "bio": "Capturing your precious moments with cinematic excellence and artistic vision.",
        "avatar": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?w=200",
        "rating": 4.9,
        "review_count": 312,
        "location": "Lagos, Nigeria",
        "verified": True,
    },
    {
        "id": "v4",
        "name": "Royal Décor",
        "specialty": "Event Decorations",
        "bio": "Transforming spaces into magical wonderlands with luxurious décor and floral arrangements.",
        "avatar": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=200",
        "rating": 4.7,
        "review_count": 156,
        "location": "Port Harcourt, Nigeria",
        "verified": True,
    },
    {
        "id": "v5",
        "name": "SoundWave Entertainment",
        "specialty": "DJ & Sound",
        "bio": "Professional DJs and sound engineers making every event unforgettable.",
        "avatar": "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?w=200",
        "rating": 4.8,
        "review_count": 203,
        "location": "Lagos, Nigeria",
        "verified": True,
    },
]

SERVICE_ROWS = [
    # ── Weddings ────────────────────────────────────────────────────
    {
        "id": "s1",
        "name": "Luxury Wedding Package",
        "category": "weddings",
        "description": (
            "Our signature luxury wedding package includes full event coordination, venue styling, "
            "guest management, and day-of coordination. Package includes consultation meetings, "
            "vendor coordination, timeline creation, rehearsal coordination, and up to 12 hours "
            "of day-of coverage."
        ),
        "short_description": "Complete luxury wedding planning & coordination",
        "price": 2500000,
        "price_type": "starting",
        "rating": 4.9,
        "review_count": 89,
        "images": [
            "https://images.unsplash.com/photo-1519741497674-611481863552?w=800",
            "https://images.unsplash.com/photo-1511285560929-80b456fea0bc?w=800",
        ],
        "vendor_id": "v1",
        "vendor_name": "Elegance Events",
        "location": "Lagos, Nigeria",
        "features": ["Full Planning", "Vendor Management", "Day-of Coordination", "Guest Management", "Venue Styling"],
    },
    {
        "id": "s2",
        "name": "Traditional Wedding Setup",
        "category": "weddings",
        "description": (
            "Beautiful traditional wedding décor package featuring authentic cultural elements, "
            "vibrant colors, and stunning arrangements that honor your heritage."
        ),
        "short_description": "Authentic traditional wedding decorations",
        "price": 800000,
        "price_type": "starting",
        "rating": 4.8,
        "review_count": 67,
        "images": ["https://images.unsplash.com/photo-1583939003579-730e3918a45a?w=800"],
        "vendor_id": "v4",
        "vendor_name": "Royal Décor",
        "location": "Lagos, Nigeria",
        "features": ["Cultural Elements", "Floral Arrangements", "Stage Setup", "Lighting"],
    },
    # ── Birthdays ───────────────────────────────────────────────────
    {
        "id": "s3",
        "name": "Children's Birthday Party",
        "category": "birthdays",
        "description": (
            "Magical birthday party package for kids including themed decorations, entertainment, "
            "games, and party favors."
        ),
        "short_description": "Fun-filled kids birthday celebration",
        "price": 150000,
        "price_type": "starting",
        "rating": 4.7,
        "review_count": 124,
        "images": ["https://images.unsplash.com/photo-1530103862676-de8c9debad1d?w=800"],
        "vendor_id": "v4",
        "vendor_name": "Royal Décor",
        "location": "Lagos, Nigeria",
        "features": ["Themed Décor", "Entertainment", "Party Games", "Party Favors"],
    },
    {
        "id": "s4",
        "name": "Milestone Birthday Celebration",
        "category": "birthdays",
        "description": (
            "Elegant celebration package for milestone birthdays (30th, 40th, 50th, etc.) with "
            "sophisticated décor, entertainment, and catering options."
        ),
        "short_description": "Elegant milestone birthday package",
        "price": 500000,
        "price_type": "starting",
        "rating": 4.8,
        "review_count": 56,
        "images": ["https://images.unsplash.com/photo-1527529482837-4698179dc6ce?w=800"],
        "vendor_id": "v1",
        "vendor_name": "Elegance Events",
        "location": "Lagos, Nigeria",
        "features": ["Elegant Décor", "DJ Services", "Photo Booth", "Catering Coordination"],
    },
    # ── Corporate ───────────────────────────────────────────────────
    {
        "id": "s5",
        "name": "Corporate Conference Package",
        "category": "corporate",
        "description": (
            "Professional conference and seminar setup including AV equipment, staging, "
            "registration management, and catering coordination for up to 500 attendees."
        ),
        "short_description": "Professional conference & seminar services",
        "price": 1200000,
        "price_type": "starting",
        "rating": 4.9,
        "review_count": 78,
        "images": ["https://images.unsplash.com/photo-1540575467063-178a50c2df87?w=800"],
        "vendor_id": "v1",
        "vendor_name": "Elegance Events",
        "location": "Lagos, Nigeria",
        "features": ["AV Equipment", "Stage Setup", "Registration", "Catering", "Branding"],
    },
    {
        "id": "s6",
        "name": "Product Launch Event",
        "category": "corporate",
        "description": (
            "Make your product launch unforgettable with our comprehensive event package including "
            "media management, entertainment, and stunning visual presentations."
        ),
        "short_description": "Impactful product launch services",
        "price": 2000000,
        "price_type": "starting",
        "rating": 4.8,
        "review_count": 34,
        "images": ["https://images.unsplash.com/photo-1475721027785-f74eccf877e2?w=800"],
        "vendor_id": "v1",
        "vendor_name": "Elegance Events",
        "location": "Lagos, Nigeria",
        "features": ["Media Management", "Visual Production", "Entertainment", "PR Support"],
    },
    # ── Baby Showers ────────────────────────────────────────────────
    {
        "id": "s7",
        "name": "Classic Baby Shower",
        "category": "baby-showers",
        "description": (
            "Sweet and elegant baby shower setup with beautiful decorations, games, and refreshments."
        ),
        "short_description": "Elegant baby shower celebration",
        "price": 200000,
        "price_type": "starting",
        "rating": 4.7,
        "review_count": 89,
        "images": ["https://images.unsplash.com/photo-1544776193-352d25ca82cd?w=800"],
        "vendor_id": "v4",
        "vendor_name": "Royal Décor",
        "location": "Lagos, Nigeria",
        "features": ["Themed Décor", "Games Package", "Refreshments", "Gift Table Setup"],
    },
    # ── Catering ────────────────────────────────────────────────────
    {
        "id": "s8",
        "name": "Premium Catering - 100 Guests",
        "category": "catering",
        "description": (
            "Exquisite 3-course meal service for up to 100 guests. Includes appetizers, main "
            "courses, desserts, and professional service staff."
        ),
        "short_description": "Gourmet catering for 100 guests",
        "price": 750000,
        "price_type": "fixed",
        "rating": 4.9,
        "review_count": 145,
        "images": ["https://images.unsplash.com/photo-1555244162-803834f70033?w=800"],
        "vendor_id": "v2",
        "vendor_name": "Divine Catering Co.",
        "location": "Lagos, Nigeria",
        "features": ["3-Course Meal", "Service Staff", "Table Setup", "Cleanup"],
    },
    {
        "id": "s9",
        "name": "Cocktail Party Catering",
        "category": "catering",
        "description": (
            "Sophisticated cocktail party menu with passed hors d'oeuvres, cocktails, and elegant "
            "presentation for up to 150 guests."
        ),
        "short_description": "Elegant cocktail party service",
        "price": 500000,
        "price_type": "starting",
        "rating": 4.8,
        "review_count": 98,
        "images": ["https://images.unsplash.com/photo-1414235077428-338989a2e8c0?w=800"],
        "vendor_id": "v2",
        "vendor_name": "Divine Catering Co.",
        "location": "Abuja, Nigeria",
        "features": ["Hors d'oeuvres", "Signature Cocktails", "Bartenders", "Elegant Setup"],
    },
    # ── Decorations ─────────────────────────────────────────────────
    {
        "id": "s10",
        "name": "Luxury Floral Arrangements",
        "category": "decorations",
        "description": (
            "Stunning floral centerpieces and arrangements using premium fresh flowers. Custom "
            "designs to match your event theme and color palette."
        ),
        "short_description": "Premium fresh flower arrangements",
        "price": 300000,
        "price_type": "starting",
        "rating": 4.9,
        "review_count": 167,
        "images": ["https://images.unsplash.com/photo-1519225421980-715cb0215aed?w=800"],
        "vendor_id": "v4",
        "vendor_name": "Royal Décor",
        "location": "Lagos, Nigeria",
        "features": ["Fresh Flowers", "Custom Designs", "Setup & Removal", "Centerpieces"],
    },
    {
        "id": "s11",
        "name": "Complete Event Styling",
        "category": "decorations",
        "description": (
            "Full venue transformation including draping, lighting, furniture styling, and "
            "thematic decorations."
        ),
        "short_description": "Complete venue transformation",
        "price": 600000,
        "price_type": "starting",
        "rating": 4.8,
        "review_count": 123,
        "images": ["https://images.unsplash.com/photo-1478146896981-b80fe463b330?w=800"],
        "vendor_id": "v4",
        "vendor_name": "Royal Décor",
        "location": "Port Harcourt, Nigeria",
        "features": ["Draping", "Lighting Design", "Furniture Styling", "Themed Décor"],
    },
    # ── Photography ─────────────────────────────────────────────────
    {
        "id": "s12",
        "name": "Wedding Photography Package",
        "category": "photography",
        "description": (
            "Full-day wedding photography coverage with 2 photographers, drone footage, edited "
            "photos, and a premium photo album."
        ),
        "short_description": "Complete wedding photo coverage",
        "price": 450000,
        "price_type": "fixed",
        "rating": 4.9,
        "review_count": 234,
        "images": ["https://images.unsplash.com/photo-1537633552985-df8429e8048b?w=800"],
        "vendor_id": "v3",
        "vendor_name": "Pixel Perfect Studios",
        "location": "Lagos, Nigeria",
        "features": ["2 Photographers", "Drone Coverage", "500+ Edited Photos", "Premium Album"],
    },
    {
        "id": "s13",
        "name": "Event Videography",
        "category": "photography",
        "description": (
            "Professional event videography with 4K recording, cinematic editing, and highlight reel."
        ),
        "short_description": "Cinematic event video coverage",
        "price": 350000,
        "price_type": "starting",
        "rating": 4.8,
        "review_count": 156,
        "images": ["https://images.unsplash.com/photo-1492691527719-9d1e07e534b4?w=800"],
        "vendor_id": "v3",
        "vendor_name": "Pixel Perfect Studios",
        "location": "Lagos, Nigeria",
        "features": ["4K Recording", "Cinematic Edit", "Highlight Reel", "Raw Footage"],
    },
    # ── Concerts ────────────────────────────────────────────────────
    {
        "id": "s14",
        "name": "Live Band Performance",
        "category": "concerts",
        "description": (
            "Professional live band for your event featuring versatile musicians who can perform "
            "various genres from highlife to contemporary hits."
        ),
        "short_description": "Professional live music entertainment",
        "price": 400000,
        "price_type": "starting",
        "rating": 4.7,
        "review_count": 89,
        "images": ["https://images.unsplash.com/photo-1493225457124-a3eb161ffa5f?w=800"],
        "vendor_id": "v5",
        "vendor_name": "SoundWave Entertainment",
        "location": "Lagos, Nigeria",
        "features": ["5-Piece Band", "Sound Equipment", "4-Hour Performance", "MC Services"],
    },
    {
        "id": "s15",
        "name": "Premium DJ Package",
        "category": "concerts",
        "description": (
            "Top-tier DJ services with professional sound system, lighting effects, and MC services."
        ),
        "short_description": "Professional DJ & sound services",
        "price": 250000,
        "price_type": "starting",
        "rating": 4.8,
        "review_count": 178,
        "images": ["https://images.unsplash.com/photo-1571266028243-e4733b0f0bb0?w=800"],
        "vendor_id": "v5",
        "vendor_name": "SoundWave Entertainment",
        "location": "Lagos, Nigeria",
        "features": ["Pro Sound System", "Lighting Effects", "MC Services", "6-Hour Coverage"],
    },
    # ── Rentals ─────────────────────────────────────────────────────
    {
        "id": "s16",
        "name": "Luxury Furniture Rental",
        "category": "rentals",
        "description": (
            "Premium event furniture including gold chiavari chairs, glass tables, lounge sets, "
            "and accent pieces for up to 200 guests."
        ),
        "short_description": "Premium event furniture package",
        "price": 350000,
        "price_type": "starting",
        "rating": 4.7,
        "review_count": 134,
        "images": ["https://images.unsplash.com/photo-1519167758481-83f550bb49b3?w=800"],
        "vendor_id": "v4",
        "vendor_name": "Royal Décor",
        "location": "Lagos, Nigeria",
        "features": ["Chiavari Chairs", "Glass Tables", "Lounge Sets", "Delivery & Setup"],
    },
    {
        "id": "s17",
        "name": "Tent & Canopy Rental",
        "category": "rentals",
        "description": (
            "High-quality marquee tents and canopies with optional flooring, lighting, and climate "
            "control for outdoor events."
        ),
        "short_description": "Premium outdoor shelter solutions",
        "price": 400000,
        "price_type": "starting",
        "rating": 4.6,
        "review_count": 98,
        "images": ["https://images.unsplash.com/photo-1478146896981-b80fe463b330?w=800"],
        "vendor_id": "v4",
        "vendor_name": "Royal Décor",
        "location": "Lagos, Nigeria",
        "features": ["Marquee Tents", "Flooring", "Lighting", "Climate Control"],
    },
    {
        "id": "s18",
        "name": "Audio Visual Equipment",
        "category": "rentals",
        "description": (
            "Complete AV setup including projectors, LED screens, microphones, speakers, and "
            "technical support for conferences and events."
        ),
        "short_description": "Professional AV equipment rental",
        "price": 200000,
        "price_type": "starting",
        "rating": 4.8,
        "review_count": 87,
        "images": ["https://images.unsplash.com/photo-1505373877841-8d25f7d46678?w=800"],
        "vendor_id": "v5",
        "vendor_name": "SoundWave Entertainment",
        "location": "Lagos, Nigeria",
        "features": ["LED Screens", "Projectors", "Sound System", "Technical Support"],
    },
]

CATEGORIES: list[Category] = [Category(**row) for row in CATEGORY_ROWS]
VENDORS: list[Vendor] = [Vendor(**row) for row in VENDOR_ROWS]
SERVICES: list[Service] = [Service(**row) for row in SERVICE_ROWS]
