"""
Content blocks rendered on the landing page.
Each model matches one reusable template partial (stat, feature card,
step card, price card).
"""

from pydantic import BaseModel
from typing import List


class NavLink(BaseModel):
    label: str
    anchor: str


class Stat(BaseModel):
    """Key metric shown in the hero section"""
    title: str
    value: str


class FeatureCard(BaseModel):
    """Highlights a product feature"""
    title: str
    desc: str
    icon: str


class StepCard(BaseModel):
    """One step of the 'How it works' process"""
    index: int
    title: str
    desc: str


class PriceCard(BaseModel):
    """Pricing plan; featured plans are highlighted"""
    title: str
    price: str
    benefits: List[str] = []
    featured: bool = False


class ProductBanner(BaseModel):
    tag: str
    headline: str
    blurb: str


class ProductSpotlight(BaseModel):
    title: str
    summary: str
    bullets: List[str] = []
    actions: List[str] = []


class LandingContent(BaseModel):
    """Everything the landing page template needs besides request data"""
    site_name: str
    tagline: str
    nav: List[NavLink]
    banner: ProductBanner
    hero_stats: List[Stat]
    floating_stat: Stat
    product: ProductSpotlight
    features: List[FeatureCard]
    steps: List[StepCard]
    pricing: List[PriceCard]
