from models import db
from models.user import Role
from models.category import Category
from models.service import Service
from models.price_item import PriceItem
from models.review import Review

DEFAULT_ROLES = ["CLIENT", "ADMIN"]

HAIR = "Serviços de Cabelo"
NAILS = "Serviços de Unhas"
SKIN = "Tratamentos de Pele"
OTHER = "Outros Serviços"

DEFAULT_CATEGORIES = [
    (HAIR, "fas fa-cut"),
    (NAILS, "fas fa-hand-sparkles"),
    (SKIN, "fas fa-spa"),
    (OTHER, "fas fa-magic"),
]

DEFAULT_SERVICES = [
    {
        "name": "Corte de Cabelo",
        "description": "Cortes modernos e clássicos para todos os estilos e tipos de cabelo, "
                       "feitos por profissionais experientes.",
        "min_price": 50, "max_price": 80, "category": HAIR, "icon": "fas fa-cut", "featured": True,
    },
    {
        "name": "Manicure",
        "description": "Cuidados completos para suas unhas, com uma grande variedade de cores "
                       "e designs para escolher.",
        "min_price": 30, "max_price": 50, "category": NAILS, "icon": "fas fa-hand-sparkles", "featured": True,
    },
    {
        "name": "Tratamento de Pele",
        "description": "Tratamentos especializados para uma pele saudável e radiante, "
                       "adaptados às suas necessidades.",
        "min_price": 80, "max_price": 130, "category": SKIN, "icon": "fas fa-spa", "featured": True,
    },
]

DEFAULT_PRICE_ITEMS = [
    ("Corte Feminino", 50, 80, HAIR),
    ("Corte Masculino", 35, 60, HAIR),
    ("Coloração", 90, 150, HAIR),
    ("Mechas/Luzes", 120, 200, HAIR),
    ("Tratamento Capilar", 70, 120, HAIR),
    ("Manicure Simples", 30, 30, NAILS),
    ("Pedicure Simples", 40, 40, NAILS),
    ("Manicure e Pedicure", 65, 65, NAILS),
    ("Esmaltação em Gel", 50, 50, NAILS),
    ("Unhas em Gel/Acrílico", 90, 120, NAILS),
    ("Limpeza de Pele", 80, 80, SKIN),
    ("Hidratação Facial", 70, 70, SKIN),
    ("Peeling", 90, 130, SKIN),
    ("Microagulhamento", 150, 150, SKIN),
    ("Massagem Facial", 60, 60, SKIN),
    ("Depilação (pequenas áreas)", 25, 40, OTHER),
    ("Depilação (grandes áreas)", 50, 80, OTHER),
    ("Design de Sobrancelhas", 35, 35, OTHER),
    ("Maquiagem Social", 90, 90, OTHER),
    ("Maquiagem para Eventos", 120, 150, OTHER),
]

DEFAULT_REVIEWS = [
    ("Maria Silva", 4.5,
     "O ambiente é super acolhedor e os profissionais são muito atenciosos. "
     "Meu corte ficou exatamente como eu queria! Voltarei com certeza."),
    ("João Pereira", 5,
     "Sempre fui muito exigente com meu cabelo, mas aqui encontrei profissionais "
     "que realmente entendem o que eu quero. Recomendo a todos!"),
    ("Ana Costa", 4.5,
     "A manicure é excelente! Minhas unhas nunca ficaram tão bonitas e a esmaltação "
     "em gel durou muito mais do que em outros lugares. Super recomendo!"),
]

def seed_roles():
    existing = {r.name for r in Role.query.all()}
    for name in DEFAULT_ROLES:
        if name not in existing:
            db.session.add(Role(name=name))
    db.session.commit()

def seed_catalog():
    """Insert the default salon catalogue. Idempotent; returns rows added."""
    added = 0
    categories = {c.name: c for c in Category.query.all()}
    for name, icon in DEFAULT_CATEGORIES:
        if name not in categories:
            cat = Category(name=name, icon=icon)
            db.session.add(cat)
            categories[name] = cat
            added += 1
    db.session.flush()

    existing_services = {s.name for s in Service.query.all()}
    for data in DEFAULT_SERVICES:
        if data["name"] in existing_services:
            continue
        db.session.add(Service(
            name=data["name"],
            description=data["description"],
            min_price=data["min_price"],
            max_price=data["max_price"],
            category_id=categories[data["category"]].id,
            icon=data["icon"],
            featured=data["featured"],
        ))
        added += 1

    existing_prices = {p.name for p in PriceItem.query.all()}
    for name, min_price, max_price, category in DEFAULT_PRICE_ITEMS:
        if name in existing_prices:
            continue
        db.session.add(PriceItem(
            name=name,
            min_price=min_price,
            max_price=max_price,
            category_id=categories[category].id,
        ))
        added += 1

    existing_reviews = {r.client_name for r in Review.query.all()}
    for client_name, rating, comment in DEFAULT_REVIEWS:
        if client_name in existing_reviews:
            continue
        db.session.add(Review(client_name=client_name, rating=rating, comment=comment, likes=1))
        added += 1

    db.session.commit()
    return added
