"""
Sample data for local development: amenities catalog, developers, compounds,
users of every role and a handful of apartments.
"""
import logging
from typing import Dict, List

from sqlalchemy.orm import Session

from app.models import Amenity, Apartment, Compound, Developer, User, UserRole

logger = logging.getLogger(__name__)

AMENITIES = [
    "Pool", "Gym", "Parking", "Balcony", "Elevator", "Security",
    "Air Conditioning", "Heating", "Dishwasher", "Washing Machine",
    "Dryer", "Furnished", "Pet Friendly", "Garden", "Terrace",
    "Storage", "Bike Storage", "Concierge", "Doorman", "Rooftop",
    "Clubhouse", "Schools", "Business Hub", "Sports Clubs", "Mosque",
]

DEVELOPERS = [
    {"name": "Orascom Development Egypt", "description": "Leading real estate developer in Egypt",
     "website": "https://www.orascomdh.com"},
    {"name": "Palm Hills Developments", "description": "Premium real estate developer",
     "website": "https://www.palmhillsdevelopments.com"},
    {"name": "Talaat Moustafa Group", "description": "Egypt's largest real estate developer",
     "website": "https://www.tmg.eg"},
    {"name": "Emaar Misr", "description": "Subsidiary of Emaar Properties",
     "website": "https://www.emaarmisr.com"},
]

COMPOUNDS = [
    {"name": "O West Orascom", "description": "Luxury compound in 6th of October City",
     "location": "6th of October City, Giza"},
    {"name": "Palm Hills Katameya", "description": "Premium residential compound",
     "location": "Katameya, Cairo"},
    {"name": "Madinaty", "description": "Integrated city development",
     "location": "New Cairo, Cairo"},
    {"name": "Marassi", "description": "Beachfront resort community",
     "location": "North Coast, Alexandria"},
]

USERS = [
    {"first_name": "Admin", "last_name": "User", "email": "admin@apartmentapp.com",
     "phone": "+201234567890", "role": UserRole.ADMIN.value},
    {"first_name": "Ahmed", "last_name": "Hassan", "email": "ahmed@apartmentapp.com",
     "phone": "+201234567891", "role": UserRole.AGENT.value},
    {"first_name": "Fatima", "last_name": "Ali", "email": "fatima@apartmentapp.com",
     "phone": "+201234567892", "role": UserRole.AGENT.value},
    {"first_name": "Omar", "last_name": "Mohamed", "email": "omar@apartmentapp.com",
     "phone": "+201234567893", "role": UserRole.USER.value},
]

APARTMENTS = [
    {"unit_name": "1 Bedroom Apartment", "unit_number": "A101", "project": "O West Orascom",
     "address": "O West, 6th of October City", "city": "Giza", "price": 8500, "listing_type": "rent",
     "bedrooms": 1, "bathrooms": 1, "square_feet": 84,
     "description": "A 1 bedroom apartment in O West Orascom with 1 bathroom.",
     "amenities": ["Clubhouse", "Schools", "Business Hub", "Sports Clubs", "Mosque", "Bike Storage"]},
    {"unit_name": "2 Bedroom Apartment", "unit_number": "B205", "project": "Palm Hills Katameya",
     "address": "Palm Hills, Katameya", "city": "Cairo", "price": 1200000, "listing_type": "sale",
     "bedrooms": 2, "bathrooms": 2, "square_feet": 120,
     "description": "Spacious 2 bedroom apartment with modern amenities and beautiful views.",
     "amenities": ["Pool", "Gym", "Security", "Garden", "Parking", "Elevator"]},
    {"unit_name": "3 Bedroom Villa", "unit_number": "V301", "project": "Madinaty",
     "address": "Madinaty, New Cairo", "city": "Cairo", "price": 2500000, "listing_type": "sale",
     "bedrooms": 3, "bathrooms": 3, "square_feet": 180,
     "description": "Luxury 3 bedroom villa with private garden and modern amenities.",
     "amenities": ["Garden", "Pool", "Gym", "Security", "Parking", "Balcony"]},
    {"unit_name": "Studio Apartment", "unit_number": "S401", "project": "Marassi",
     "address": "Marassi, North Coast", "city": "Alexandria", "state": "Alexandria Governorate",
     "price": 6000, "listing_type": "rent", "bedrooms": 0, "bathrooms": 1, "square_feet": 45,
     "description": "Cozy studio apartment perfect for singles or couples.",
     "amenities": ["Pool", "Security", "Parking"]},
    {"unit_name": "2 Bedroom Duplex", "unit_number": "D601", "project": "O West Orascom",
     "address": "O West, 6th of October City", "city": "Giza", "price": 12000, "listing_type": "rent",
     "bedrooms": 2, "bathrooms": 2, "square_feet": 140,
     "description": "Modern 2 bedroom duplex with open concept living area and private balcony.",
     "amenities": ["Balcony", "Pool", "Gym", "Security", "Parking", "Garden"]},
]


def _seed_named(db: Session, model, rows: List[dict]) -> Dict[str, object]:
    """Insert reference rows missing by name, return all of them keyed by name"""
    existing = {entity.name: entity for entity in db.query(model).all()}
    for row in rows:
        if row["name"] not in existing:
            entity = model(**row)
            db.add(entity)
            existing[row["name"]] = entity
    db.flush()
    return existing


def seed_database(db: Session) -> Dict[str, int]:
    """
    Fill an empty database with sample data. Safe to run twice:
    rows already present (by name, email or unit number) are skipped.

    Returns:
        Number of rows of each kind present after seeding
    """
    amenities = _seed_named(db, Amenity, [{"name": name} for name in AMENITIES])
    developers = _seed_named(db, Developer, DEVELOPERS)
    compounds = _seed_named(db, Compound, COMPOUNDS)

    users = {user.email: user for user in db.query(User).all()}
    for row in USERS:
        if row["email"] not in users:
            user = User(**row)
            db.add(user)
            users[row["email"]] = user
    db.flush()

    agents = [users[row["email"]] for row in USERS if row["role"] == UserRole.AGENT.value]
    developer_list = [developers[row["name"]] for row in DEVELOPERS]
    compound_list = [compounds[row["name"]] for row in COMPOUNDS]
    known_units = {number for (number,) in db.query(Apartment.unit_number).all()}

    # Round-robin over developers, compounds and agents
    for index, row in enumerate(APARTMENTS):
        if row["unit_number"] in known_units:
            continue
        data = {key: value for key, value in row.items() if key != "amenities"}
        apartment = Apartment(
            **data,
            images=[],
            agent_id=agents[index % len(agents)].id,
            developer_id=developer_list[index % len(developer_list)].id,
            compound_id=compound_list[index % len(compound_list)].id,
        )
        apartment.amenities = [amenities[name] for name in row["amenities"] if name in amenities]
        db.add(apartment)

    db.commit()

    counts = {
        "amenities": db.query(Amenity).count(),
        "developers": db.query(Developer).count(),
        "compounds": db.query(Compound).count(),
        "users": db.query(User).count(),
        "apartments": db.query(Apartment).count(),
    }
    logger.info(f"Database seeded: {counts}")
    return counts
