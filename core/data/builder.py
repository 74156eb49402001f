# Event builder lookup tables
# Themes, colour palettes, guest sizes, venues, budgets and event types
# offered by the builder wizard. Budget amounts are whole Naira.

from core.models.builder import (
    BudgetRange,
    ColorPalette,
    EventTheme,
    EventTypeCategory,
    GuestSizeRange,
    VenueType,
)

EVENT_THEMES = [
    EventTheme(id="classic-elegance",     name="Classic Elegance",     description="Timeless sophistication with refined details", icon="✨"),
    EventTheme(id="modern-minimalist",    name="Modern Minimalist",    description="Clean lines and contemporary aesthetics",      icon="◻️"),
    EventTheme(id="romantic-garden",      name="Romantic Garden",      description="Soft florals and natural beauty",              icon="🌸"),
    EventTheme(id="glamorous-luxury",     name="Glamorous Luxury",     description="Opulent details and rich textures",            icon="💎"),
    EventTheme(id="rustic-charm",         name="Rustic Charm",         description="Natural elements with cozy warmth",            icon="🌿"),
    EventTheme(id="tropical-paradise",    name="Tropical Paradise",    description="Vibrant colors and exotic vibes",              icon="🌴"),
    EventTheme(id="cultural-traditional", name="Cultural Traditional", description="Heritage-inspired celebrations",               icon="🎭"),
    EventTheme(id="fun-playful",          name="Fun & Playful",        description="Bright, colorful, and energetic",              icon="🎉"),
]

COLOR_PALETTES = [
    ColorPalette(id="gold-ivory",    name="Gold & Ivory",    colors=["#D4AF37", "#FFFFF0", "#2C2C2C"], primary="#D4AF37"),
    ColorPalette(id="blush-rose",    name="Blush Rose",      colors=["#E8B4B8", "#F5E1E4", "#8B5A5A"], primary="#E8B4B8"),
    ColorPalette(id="navy-gold",     name="Navy & Gold",     colors=["#1E3A5F", "#D4AF37", "#FFFFFF"], primary="#1E3A5F"),
    ColorPalette(id="sage-cream",    name="Sage & Cream",    colors=["#9CAF88", "#F5F5DC", "#3D4F3D"], primary="#9CAF88"),
    ColorPalette(id="burgundy-gold", name="Burgundy & Gold", colors=["#722F37", "#D4AF37", "#F5F5F5"], primary="#722F37"),
    ColorPalette(id="purple-silver", name="Purple & Silver", colors=["#6B4E71", "#C0C0C0", "#2C2C2C"], primary="#6B4E71"),
    ColorPalette(id="coral-teal",    name="Coral & Teal",    colors=["#FF6F61", "#008080", "#FFFFFF"], primary="#FF6F61"),
    ColorPalette(id="black-white",   name="Black & White",   colors=["#000000", "#FFFFFF", "#888888"], primary="#000000"),
]

GUEST_SIZE_RANGES = [
    GuestSizeRange(id="intimate", label="Intimate", range="1-50",    min=1,   max=50,   icon="👥"),
    GuestSizeRange(id="small",    label="Small",    range="51-100",  min=51,  max=100,  icon="👥"),
    GuestSizeRange(id="medium",   label="Medium",   range="101-200", min=101, max=200,  icon="👥"),
    GuestSizeRange(id="large",    label="Large",    range="201-400", min=201, max=400,  icon="👥"),
    GuestSizeRange(id="grand",    label="Grand",    range="400+",    min=400, max=1000, icon="👥"),
]

VENUE_TYPES = [
    VenueType(id="indoor-ballroom", name="Indoor Ballroom",  icon="🏛️", description="Elegant indoor spaces"),
    VenueType(id="outdoor-garden",  name="Outdoor Garden",   icon="🌳", description="Beautiful open-air settings"),
    VenueType(id="beach",           name="Beach/Waterfront", icon="🏖️", description="Scenic waterside locations"),
    VenueType(id="rooftop",         name="Rooftop",          icon="🌃", description="City views and open sky"),
    VenueType(id="restaurant",      name="Restaurant/Hotel", icon="🍽️", description="All-inclusive venues"),
    VenueType(id="home",            name="Home/Private",     icon="🏠", description="Intimate private settings"),
    VenueType(id="industrial",      name="Industrial/Loft",  icon="🏭", description="Trendy urban spaces"),
    VenueType(id="destination",     name="Destination",      icon="✈️", description="Travel-based celebrations"),
]

BUDGET_RANGES = [
    BudgetRange(id="budget",   label="Budget Friendly", range="₦100K - ₦500K", min=100_000,   max=500_000),
    BudgetRange(id="moderate", label="Moderate",        range="₦500K - ₦1.5M", min=500_000,   max=1_500_000),
    BudgetRange(id="premium",  label="Premium",         range="₦1.5M - ₦3M",   min=1_500_000, max=3_000_000),
    BudgetRange(id="luxury",   label="Luxury",          range="₦3M - ₦5M",     min=3_000_000, max=5_000_000),
    BudgetRange(id="ultra",    label="Ultra Luxury",    range="₦5M+",          min=5_000_000, max=50_000_000),
]

EVENT_TYPE_CATEGORIES = [
    EventTypeCategory(id="wedding",     name="Wedding",         icon="💍", category_ids=["weddings"]),
    EventTypeCategory(id="birthday",    name="Birthday",        icon="🎂", category_ids=["birthdays"]),
    EventTypeCategory(id="corporate",   name="Corporate Event", icon="🏢", category_ids=["corporate"]),
    EventTypeCategory(id="baby-shower", name="Baby Shower",     icon="👶", category_ids=["baby-showers"]),
    EventTypeCategory(id="concert",     name="Concert/Party",   icon="🎤", category_ids=["concerts"]),
]
