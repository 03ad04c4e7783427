"""
Static marketing copy for the landing page.
"""

from jrtech.models.content import (
    LandingContent, NavLink, ProductBanner, Stat, ProductSpotlight,
    FeatureCard, StepCard, PriceCard
)

NAV_LINKS = [
    NavLink(label="Features", anchor="features"),
    NavLink(label="How it works", anchor="work"),
    NavLink(label="Product", anchor="product"),
    NavLink(label="Pricing", anchor="pricing"),
    NavLink(label="Contact", anchor="contact"),
]

BANNER = ProductBanner(
    tag="NEW · COMING SOON",
    headline="AI SmartBill — Plug. Bill. Done.",
    blurb=(
        "An AI-powered, pendrive-ready billing experience for shopkeepers — instant launch, "
        "barcode & voice-assisted billing, predictive suggestions, and offline-first performance."
    ),
)

HERO_STATS = [
    Stat(title="Faster launch", value="3x"),
    Stat(title="Uptime", value="99.99%"),
]

FLOATING_STAT = Stat(title="Active Users", value="1000+")

PRODUCT = ProductSpotlight(
    title="AI SmartBill — Designed for Shopkeepers",
    summary=(
        "Fast, offline-first billing that runs directly from a pendrive or as a desktop app. "
        "AI suggestions, voice billing, barcode scanning, and a minimal, high-contrast UI "
        "that keeps queues moving."
    ),
    bullets=[
        "Instant launch from pendrive (Electron portable build)",
        "AI-powered suggestions & quick-add buttons",
        "Offline-first with local DB and sync",
        "Full-screen, tactile UI for billing counters",
    ],
    actions=["Scan", "Voice", "Quick Add"],
)

FEATURES = [
    FeatureCard(
        title="Lightning Performance",
        desc="Optimized builds, code-splitting, and server-side rendering to make your app feel instant.",
        icon="⚡",
    ),
    FeatureCard(
        title="Secure by Default",
        desc="End-to-end encryption, OAuth flows, and hardened cloud infrastructure standards.",
        icon="🔒",
    ),
    FeatureCard(
        title="Pixel-perfect UI",
        desc="Motion-driven interfaces, micro-interactions and accessible design patterns.",
        icon="🎨",
    ),
]

STEPS = [
    StepCard(index=1, title="Design & Prototype",
             desc="We craft motion-led prototypes and test UX flows before a single line of code."),
    StepCard(index=2, title="Build & Integrate",
             desc="Fast iterations, CI/CD pipelines and modular architecture for scale."),
    StepCard(index=3, title="Launch & Monitor",
             desc="Robust observability and performance tuning post-launch."),
]

PRICING = [
    PriceCard(title="Starter", price="Free", benefits=["1 project", "Basic support", "Community docs"]),
    PriceCard(title="Pro", price="Rs.19999/mo",
              benefits=["Unlimited projects", "Priority support", "Advanced analytics"], featured=True),
    PriceCard(title="Enterprise", price="Contact",
              benefits=["SLA & onboarding", "Custom integrations", "Dedicated engineer"]),
]


def build_landing_content(site_name: str) -> LandingContent:
    return LandingContent(
        site_name=site_name,
        tagline="Software & Cloud — Next-level products",
        nav=NAV_LINKS,
        banner=BANNER,
        hero_stats=HERO_STATS,
        floating_stat=FLOATING_STAT,
        product=PRODUCT,
        features=FEATURES,
        steps=STEPS,
        pricing=PRICING,
    )
