"""Seed catalogue, users and sample orders for a fresh database."""

ADMIN_EMAIL = "admin@ericcressey.com"

_IMAGE = "https://images.unsplash.com/photo-{}?w=400&h=400&fit=crop&q=80"

PRODUCTS = [
    {
        "name": "Premium Training Program",
        "description": "Comprehensive 12-week strength training program designed for athletes. "
        "Includes video tutorials, workout plans, and nutrition guidance.",
        "price": 199.99,
        "category": "fitness",
        "image_url": _IMAGE.format("1571019613454-1cb2f99b2d8b"),
        "stock": 50,
        "featured": True,
    },
    {
        "name": "Nutrition Guide Book",
        "description": "Complete nutrition guide with meal plans and recipes. "
        "Perfect for athletes looking to optimize their diet.",
        "price": 49.99,
        "category": "nutrition",
        "image_url": _IMAGE.format("1490645935967-10de6ba17061"),
        "stock": 100,
        "featured": True,
    },
    {
        "name": "Resistance Bands Set",
        "description": "Professional-grade resistance bands for home workouts. Includes 5 different resistance levels.",
        "price": 79.99,
        "category": "equipment",
        "image_url": _IMAGE.format("1601422407692-ec4eeec1d9b3"),
        "stock": 30,
        "featured": False,
    },
    {
        "name": "Athletic Performance T-Shirt",
        "description": "High-quality moisture-wicking athletic t-shirt. Made from premium materials for maximum comfort.",
        "price": 29.99,
        "category": "apparel",
        "image_url": _IMAGE.format("1521572163474-6864f9cf17ab"),
        "stock": 75,
        "featured": False,
    },
    {
        "name": "Recovery Supplement Bundle",
        "description": "Post-workout recovery supplements for optimal muscle repair. Includes protein powder and BCAAs.",
        "price": 89.99,
        "category": "nutrition",
        "image_url": _IMAGE.format("1556910103-2c02749b8d0e"),
        "stock": 40,
        "featured": True,
    },
    {
        "name": "Adjustable Dumbbells",
        "description": "Space-saving adjustable dumbbells (5-50 lbs each). Perfect for home gyms with limited space.",
        "price": 299.99,
        "category": "equipment",
        "image_url": _IMAGE.format("1534438327276-14e5300c3a48"),
        "stock": 15,
        "featured": False,
    },
    {
        "name": "Yoga Mat Premium",
        "description": "Extra-thick non-slip yoga mat for all types of workouts. Eco-friendly and easy to clean.",
        "price": 59.99,
        "category": "equipment",
        "image_url": _IMAGE.format("1601925260368-ae2f83cf8b7f"),
        "stock": 60,
        "featured": False,
    },
    {
        "name": "Kettlebell Set (3-Piece)",
        "description": "Professional kettlebell set with 10lb, 20lb, and 30lb weights. Perfect for full-body workouts.",
        "price": 149.99,
        "category": "equipment",
        "image_url": _IMAGE.format("1605296867304-46d5465a13f1"),
        "stock": 25,
        "featured": True,
    },
    {
        "name": "Pre-Workout Energy Formula",
        "description": "High-performance pre-workout supplement to boost energy and focus during training sessions.",
        "price": 39.99,
        "category": "nutrition",
        "image_url": _IMAGE.format("1598300042247-d088f8ab3a91"),
        "stock": 80,
        "featured": False,
    },
    {
        "name": "Compression Leggings",
        "description": "Performance compression leggings with moisture-wicking technology. Available in multiple sizes.",
        "price": 69.99,
        "category": "apparel",
        "image_url": _IMAGE.format("1552902865-b72c031ac5ea"),
        "stock": 45,
        "featured": False,
    },
    {
        "name": "Pull-Up Bar",
        "description": "Doorway-mounted pull-up bar that requires no drilling. Supports up to 300 lbs.",
        "price": 49.99,
        "category": "equipment",
        "image_url": _IMAGE.format("1517836357463-d25dfeac3438"),
        "stock": 35,
        "featured": False,
    },
    {
        "name": "Online Coaching Program",
        "description": "6-month personalized online coaching program with weekly check-ins and custom workout plans.",
        "price": 499.99,
        "category": "fitness",
        "image_url": _IMAGE.format("1544367567-0f2fcb009e0b"),
        "stock": 20,
        "featured": True,
    },
    {
        "name": "Protein Bars (12-Pack)",
        "description": "High-protein bars with natural ingredients. Perfect for post-workout recovery on the go.",
        "price": 24.99,
        "category": "nutrition",
        "image_url": _IMAGE.format("1606312619070-d48b4bc8b9e1"),
        "stock": 120,
        "featured": False,
    },
    {
        "name": "Workout Gloves",
        "description": "Padded workout gloves to protect hands during weight training. Breathable and durable.",
        "price": 19.99,
        "category": "apparel",
        "image_url": _IMAGE.format("1601925260368-ae2f83cf8b7f"),
        "stock": 90,
        "featured": False,
    },
    {
        "name": "Foam Roller",
        "description": "High-density foam roller for muscle recovery and flexibility. 36 inches long.",
        "price": 34.99,
        "category": "equipment",
        "image_url": _IMAGE.format("1601422407692-ec4eeec1d9b3"),
        "stock": 55,
        "featured": False,
    },
    {
        "name": "Meal Prep Containers (10-Pack)",
        "description": "BPA-free meal prep containers with portion dividers. Microwave and dishwasher safe.",
        "price": 29.99,
        "category": "nutrition",
        "image_url": _IMAGE.format("1556910103-2c02749b8d0e"),
        "stock": 70,
        "featured": False,
    },
    {
        "name": "Running Shorts",
        "description": "Lightweight running shorts with built-in compression liner. Perfect for all weather conditions.",
        "price": 44.99,
        "category": "apparel",
        "image_url": _IMAGE.format("1551698618-1dfe5d97d256"),
        "stock": 50,
        "featured": False,
    },
    {
        "name": "Battle Rope",
        "description": "Professional 30ft battle rope for high-intensity interval training. Great for cardio workouts.",
        "price": 89.99,
        "category": "equipment",
        "image_url": _IMAGE.format("1517836357463-d25dfeac3438"),
        "stock": 20,
        "featured": False,
    },
    {
        "name": "Creatine Monohydrate",
        "description": "Pure creatine monohydrate powder for strength and muscle gains. Unflavored and easy to mix.",
        "price": 24.99,
        "category": "nutrition",
        "image_url": _IMAGE.format("1598300042247-d088f8ab3a91"),
        "stock": 95,
        "featured": False,
    },
    {
        "name": "Hooded Sweatshirt",
        "description": "Premium cotton blend hooded sweatshirt with logo. Comfortable for workouts and casual wear.",
        "price": 54.99,
        "category": "apparel",
        "image_url": _IMAGE.format("1556821840-3a63f95609a7"),
        "stock": 40,
        "featured": False,
    },
]

USERS = [
    {"email": ADMIN_EMAIL, "name": "Admin User", "role": "admin"},
    {"email": "john.doe@example.com", "name": "John Doe", "role": "customer"},
    {"email": "jane.smith@example.com", "name": "Jane Smith", "role": "customer"},
    {"email": "mike.johnson@example.com", "name": "Mike Johnson", "role": "customer"},
    {"email": "sarah.williams@example.com", "name": "Sarah Williams", "role": "customer"},
    {"email": "david.brown@example.com", "name": "David Brown", "role": "customer"},
    {"email": "emily.davis@example.com", "name": "Emily Davis", "role": "customer"},
    {"email": "chris.miller@example.com", "name": "Chris Miller", "role": "customer"},
]

# Sample orders reference products and users by name/email.
ORDERS = [
    {
        "email": "john.doe@example.com",
        "items": [("Premium Training Program", 1), ("Nutrition Guide Book", 2)],
        "status": "delivered",
        "shipping_address": {
            "street": "123 Main Street",
            "city": "New York",
            "state": "NY",
            "zip_code": "10001",
            "country": "USA",
        },
    },
    {
        "email": "jane.smith@example.com",
        "items": [("Resistance Bands Set", 1), ("Recovery Supplement Bundle", 1)],
        "status": "shipped",
        "shipping_address": {
            "street": "456 Oak Avenue",
            "city": "Los Angeles",
            "state": "CA",
            "zip_code": "90001",
            "country": "USA",
        },
    },
    {
        "email": "mike.johnson@example.com",
        "items": [("Kettlebell Set (3-Piece)", 1)],
        "status": "processing",
        "shipping_address": {
            "street": "789 Pine Road",
            "city": "Chicago",
            "state": "IL",
            "zip_code": "60601",
            "country": "USA",
        },
    },
]

# Statuses each sample order walks through to reach its target
STATUS_PATH = {
    "processing": [],
    "shipped": ["shipped"],
    "delivered": ["shipped", "delivered"],
    "cancelled": ["cancelled"],
}
