# storefront/data/seed.py
from typing import Any, Dict, List

# raw feed, may contain duplicate ids
PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": 101,
        "name": "Laptop Pro 15",
        "category": "Electronics",
        "price": "1299.99",
        "description": "A high-performance 15-inch laptop with 16GB RAM, 512GB SSD, color-accurate display, and quiet thermals. Great for creators, developers, and power users.",
        "image": "images/laptop.jpg",
    },
    {
        "id": 102,
        "name": "Smartphone X",
        "category": "Electronics",
        "price": "899.50",
        "description": "Edge-to-edge OLED, advanced multi-lens camera, all-day battery, and flagship performance. Ships unlocked and works with major carriers.",
        "image": "images/smartphone.jpg",
    },
    {
        "id": 103,
        "name": "Noise Cancelling Headphones",
        "category": "Electronics",
        "price": "199.00",
        "description": "Wireless over-ear headphones with active noise cancellation, 30-hour battery life, USB-C fast charging, and plush memory-foam comfort.",
        "image": "images/headphones.jpg",
    },
    {
        "id": 104,
        "name": "Genuine Leather Wallet",
        "category": "Fashion",
        "price": "74.95",
        "description": "Handcrafted from full-grain leather with RFID protection. Holds 8 cards and bills while staying slim in the pocket. Ages beautifully.",
        "image": "images/wallet.jpg",
    },
    {
        "id": 105,
        "name": '4K Smart TV 55"',
        "category": "Electronics",
        "price": "699.00",
        "description": "55-inch 4K Ultra HD with HDR10, slim bezels, and a fast Smart TV OS. Stream your favorites and auto-calibrate picture with one tap.",
        "image": "images/tv.jpg",
    },
    {
        "id": 101,
        "name": "Laptop Pro 15",
        "category": "Electronics",
        "price": "1299.99",
        "description": "Duplicate entry that will be removed by dedupe (simulating noisy feeds).",
        "image": "image/laptop.jpg",
    },
]

SUPPLIER_A: List[Dict[str, Any]] = [
    {"id": 201, "name": "USB Cable", "category": "Electronics", "price": "9.99"},
    {"id": 202, "name": "Leather Belt", "category": "Fashion", "price": "39.99"},
]

SUPPLIER_B: List[Dict[str, Any]] = [
    {"id": 202, "name": "Leather Belt", "category": "Fashion", "price": "39.99"},
    {"id": 203, "name": "Wireless Mouse", "category": "Electronics", "price": "29.99"},
]

DEMO_DESCRIPTION = "This is a high-quality leather wallet with RFID protection."
DEMO_REVIEW = "Great product! Fast delivery and excellent service."
