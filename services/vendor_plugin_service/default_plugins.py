"""
Default Vendor Plugins

Static definitions of the built-in vendor integrations, their reward
catalogs, and the platform's own (native) events.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from .models import Event, VendorPlugin, utc_now


def _reward(vendor_id: str, reward_id: str, name: str, description: str,
            points: int, reward_type: str, value: str, max_redemptions: int,
            current: int, terms: str, valid_until: Optional[datetime] = None) -> dict:
    return {
        "id": reward_id,
        "vendor_id": vendor_id,
        "name": name,
        "description": description,
        "points_required": points,
        "reward_type": reward_type,
        "value": value,
        "is_active": True,
        "max_redemptions": max_redemptions,
        "current_redemptions": current,
        "valid_until": valid_until,
        "terms": terms,
    }


def build_default_plugins(now: Optional[datetime] = None) -> List[VendorPlugin]:
    """Build the built-in plugins in registration order"""
    now = now or utc_now()

    humanitix = {
        "id": "humanitix",
        "name": "Humanitix",
        "type": "ticketing",
        "description": "Tickets for good, not greed. 100% of profits go to charity.",
        "logo_url": "https://humanitix.com/logo.png",
        "website_url": "https://humanitix.com",
        "api_endpoint": "https://api.humanitix.com/v1",
        "is_active": True,
        "social_impact": {
            "type": "charity",
            "description": "100% of booking fee profits donated to education and healthcare charities",
            "beneficiary": "Various education and healthcare charities worldwide",
            "impact_metrics": {
                "total_impact": "$10M+ donated to date",
                "impact_per_ticket": "100% of booking fees",
            },
        },
        "configuration": {
            "supported_features": [
                "ticket-sales", "charity-donation", "impact-tracking", "anti-scalping", "loyalty-rewards",
            ],
        },
        "reward_catalog": {
            "vendor_id": "humanitix",
            "vendor_name": "Humanitix",
            "tiers": [
                _reward("humanitix", "humanitix-free-ticket", "Free Event Ticket",
                        "Get a free ticket to any Humanitix event under $50",
                        500, "free_ticket", "Free ticket up to $50", 100, 23,
                        "Valid for events under $50. Cannot be combined with other offers."),
                _reward("humanitix", "humanitix-discount-20", "20% Off Any Event",
                        "Get 20% discount on any Humanitix event ticket",
                        200, "discount", "20% off", 500, 127,
                        "Valid for 30 days from redemption."),
                _reward("humanitix", "humanitix-charity-match", "Double Charity Impact",
                        "We will double your charity contribution on your next purchase",
                        300, "experience", "2x charity impact", 200, 45,
                        "Applied automatically to your next ticket purchase."),
            ],
            "special_offers": [
                _reward("humanitix", "humanitix-vip-upgrade", "VIP Experience Upgrade",
                        "Upgrade to VIP access at select events",
                        1000, "upgrade", "VIP upgrade", 50, 8,
                        "Subject to availability. Valid at participating venues only.",
                        valid_until=now + timedelta(days=30)),
            ],
        },
    }

    citizen_ticket = {
        "id": "citizen-ticket",
        "name": "Citizen Ticket",
        "type": "ticketing",
        "description": "Sustainable ticketing platform that plants trees for every event.",
        "logo_url": "https://citizenticket.com/logo.png",
        "website_url": "https://citizenticket.com",
        "api_endpoint": "https://api.citizenticket.com/v1",
        "is_active": True,
        "social_impact": {
            "type": "trees",
            "description": "Plants native woodland trees to create sustainable ecosystems",
            "trees_planted": 3000,
            "beneficiary": "The National Forest Company (UK)",
            "impact_metrics": {
                "total_impact": "3,000+ trees planted",
                "impact_per_ticket": "Variable tree planting per event",
            },
        },
        "configuration": {
            "supported_features": [
                "ticket-sales", "tree-planting", "sustainability-tracking", "carbon-offset", "eco-rewards",
            ],
        },
        "reward_catalog": {
            "vendor_id": "citizen-ticket",
            "vendor_name": "Citizen Ticket",
            "tiers": [
                _reward("citizen-ticket", "citizen-free-eco-event", "Free Eco-Friendly Event",
                        "Free ticket to any sustainable event",
                        400, "free_ticket", "Free sustainable event ticket", 75, 31,
                        "Valid for certified eco-friendly events only."),
                _reward("citizen-ticket", "citizen-plant-tree", "Plant a Tree in Your Name",
                        "We will plant an additional tree in your name",
                        150, "experience", "Extra tree planted", 1000, 89,
                        "Tree will be planted in The National Forest."),
                _reward("citizen-ticket", "citizen-carbon-offset", "Carbon Offset Voucher",
                        "Offset 1 ton of CO2 emissions",
                        250, "voucher", "1 ton CO2 offset", 300, 67,
                        "Verified carbon offset through certified programs."),
            ],
            "special_offers": [
                _reward("citizen-ticket", "citizen-backstage-pass", "Eco-Festival Backstage Pass",
                        "Behind-the-scenes access at eco-friendly festivals",
                        800, "upgrade", "Backstage access", 25, 3,
                        "Valid at select eco-festivals. Must be 18+.",
                        valid_until=now + timedelta(days=45)),
            ],
        },
    }

    tickethic = {
        "id": "tickethic",
        "name": "TickEthic",
        "type": "ticketing",
        "description": "10 tickets sold = 1 tree planted. Eco-responsible ticketing.",
        "logo_url": "https://tickethic.fr/logo.png",
        "website_url": "https://tickethic.fr",
        "api_endpoint": "https://api.tickethic.fr/v1",
        "is_active": True,
        "social_impact": {
            "type": "trees",
            "description": "Plants one tree for every 10 tickets sold through WeForest partnership",
            "beneficiary": "WeForest reforestation projects",
            "impact_metrics": {
                "total_impact": "11,500+ trees planted",
                "impact_per_ticket": "1 tree per 10 tickets",
            },
        },
        "configuration": {
            "supported_features": [
                "ticket-sales", "tree-planting", "environmental-impact", "sustainability-reporting", "green-rewards",
            ],
        },
        "reward_catalog": {
            "vendor_id": "tickethic",
            "vendor_name": "TickEthic",
            "tiers": [
                _reward("tickethic", "tickethic-free-green-event", "Free Green Event Ticket",
                        "Complimentary ticket to any eco-conscious event",
                        350, "free_ticket", "Free eco-event ticket", 60, 18,
                        "Automatically plants 1 additional tree."),
                _reward("tickethic", "tickethic-10-trees", "Plant 10 Extra Trees",
                        "Plant 10 additional trees through WeForest",
                        300, "experience", "10 trees planted", 200, 54,
                        "Trees planted in verified reforestation projects."),
                _reward("tickethic", "tickethic-discount-eco", "Eco-Event Discount",
                        "25% off any environmentally certified event",
                        180, "discount", "25% off eco-events", 150, 72,
                        "Valid for events with environmental certification."),
            ],
            "special_offers": [
                _reward("tickethic", "tickethic-forest-visit", "Forest Project Visit",
                        "Guided tour of WeForest reforestation project",
                        1200, "experience", "Forest project tour", 10, 1,
                        "Transportation not included. Must be booked 30 days in advance.",
                        valid_until=now + timedelta(days=60)),
            ],
        },
    }

    ticketebo = {
        "id": "ticketebo",
        "name": "Ticketebo",
        "type": "ticketing",
        "description": "Carbon negative ticketing with Trees for Change program.",
        "logo_url": "https://ticketebo.co.uk/logo.png",
        "website_url": "https://ticketebo.co.uk",
        "api_endpoint": "https://api.ticketebo.co.uk/v1",
        "is_active": True,
        "social_impact": {
            "type": "carbon-offset",
            "description": "Carbon negative business with mangrove reforestation projects",
            "beneficiary": "Mangrove reforestation and carbon offset projects",
            "impact_metrics": {
                "total_impact": "Carbon negative since 2020",
                "impact_per_ticket": "Up to 3 trees per paperless ticket",
            },
        },
        "configuration": {
            "supported_features": [
                "ticket-sales", "carbon-offset", "tree-planting", "paperless-incentives", "climate-rewards",
            ],
        },
        "reward_catalog": {
            "vendor_id": "ticketebo",
            "vendor_name": "Ticketebo",
            "tiers": [
                _reward("ticketebo", "ticketebo-free-carbon-neutral", "Free Carbon Neutral Event",
                        "Free ticket to any carbon neutral certified event",
                        450, "free_ticket", "Free carbon neutral ticket", 80, 29,
                        "Valid for carbon negative certified events."),
                _reward("ticketebo", "ticketebo-mangrove-trees", "Plant 5 Mangrove Trees",
                        "Plant 5 mangrove trees for coastal restoration",
                        200, "experience", "5 mangrove trees", 250, 91,
                        "Planted in verified coastal restoration projects."),
                _reward("ticketebo", "ticketebo-paperless-bonus", "Paperless Event Bonus",
                        "Extra points for choosing paperless tickets",
                        100, "voucher", "+50 bonus points", 500, 156,
                        "Applied when you choose SMS delivery over email."),
            ],
            "special_offers": [
                _reward("ticketebo", "ticketebo-climate-summit", "Climate Action Summit VIP",
                        "VIP access to climate action conferences",
                        900, "upgrade", "Climate summit VIP", 15, 4,
                        "Includes networking reception and speaker meet & greet.",
                        valid_until=now + timedelta(days=90)),
            ],
        },
    }

    return [
        VendorPlugin.model_validate(definition)
        for definition in (humanitix, citizen_ticket, tickethic, ticketebo)
    ]


def build_native_events(now: Optional[datetime] = None) -> List[Event]:
    """Platform events that do not come from any vendor"""
    now = now or utc_now()
    return [
        Event(
            id="native-1",
            name="Civic Tech Meetup",
            description="Monthly meetup for civic technology enthusiasts",
            date=now + timedelta(days=3),
            venue="Tech Hub",
            organizer="Civic Impact",
            image_url="https://images.unsplash.com/photo-1515187029135-18ee286d815b?w=800&h=600&fit=crop",
            price=0,
            max_capacity=100,
            tickets_sold=25,
            is_anti_scalping_enabled=False,
            loyalty_points_reward=5,
            social_impact={
                "type": "education",
                "description": "Promoting civic engagement through technology education",
                "beneficiary": "Local community",
                "impact_metrics": {
                    "total_impact": "Educational workshops for 500+ participants",
                    "impact_per_ticket": "Contributing to digital literacy",
                },
            },
        ),
        Event(
            id="native-2",
            name="Green Finance Summit",
            description="Sustainable finance and impact investing conference",
            date=now + timedelta(days=10),
            venue="Convention Center",
            organizer="Civic Impact",
            image_url="https://images.unsplash.com/photo-1569163139394-de4e4f43e4e5?w=800&h=600&fit=crop",
            price=150,
            max_capacity=300,
            tickets_sold=89,
            is_anti_scalping_enabled=True,
            loyalty_points_reward=50,
            social_impact={
                "type": "education",
                "description": "Advancing sustainable finance practices",
                "beneficiary": "Climate action initiatives",
                "impact_metrics": {
                    "total_impact": "$1M+ in sustainable investments facilitated",
                    "impact_per_ticket": "Supporting green finance education",
                },
            },
        ),
    ]


__all__ = ["build_default_plugins", "build_native_events"]
