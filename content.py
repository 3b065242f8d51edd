from models import INTEREST_TYPES

SITE_NAME = "GreenSetu"
TAGLINE = "Practical Sustainability and AI Systems for Real-World Impact"
CONTACT_EMAIL = "shreejadhav4625@gmail.com"

HERO = {
    "badge": "Sustainability × AI",
    "title": "Where Sustainability Meets Intelligent Systems",
    "lead": (
        "We help organizations reduce environmental impact and operational cost "
        "using AI-driven automation and data-backed sustainability solutions."
    ),
}

SERVICES = [
    {
        "icon": "🌍",
        "title": "Sustainability",
        "subtitle": "Carbon Emissions Reduction",
        "items": [
            "Carbon emissions reduction strategies",
            "Supplier emissions tracking & optimization",
            "Supply chain decarbonization",
            "Emissions data collection & dashboards",
        ],
    },
    {
        "icon": "⚡",
        "title": "AI & Automation",
        "subtitle": "Intelligent Systems",
        "items": [
            "AI-powered document processing",
            "Internal knowledge & decision systems",
            "LLM-based analytics and assistants",
            "Cost-optimized, production-grade AI systems",
        ],
    },
]

REASONS = [
    {
        "icon": "⚙️",
        "title": "Hybrid Expertise",
        "desc": (
            "We combine deep sustainability domain knowledge with production-grade AI engineering. "
            "Most consultants specialize in one or the other. We do both, and do it well."
        ),
    },
    {
        "icon": "🏗️",
        "title": "Real-World Systems",
        "desc": (
            "We build production systems, not prototypes. Every solution is designed for scale, "
            "reliability, and cost optimization from day one."
        ),
    },
    {
        "icon": "📊",
        "title": "Outcome-Driven",
        "desc": (
            "We focus on measurable impact: reduced compliance costs, faster reporting, "
            "lower emissions footprint, and optimized operational efficiency."
        ),
    },
    {
        "icon": "💡",
        "title": "No Buzzwords",
        "desc": (
            "We speak plainly about capabilities and limitations. You get honest assessment "
            "and realistic timelines, not marketing hype."
        ),
    },
]

PROCESS = [
    {"step": "01", "title": "Discover", "desc": "We understand your sustainability and operational objectives."},
    {"step": "02", "title": "Design", "desc": "We design lean data & AI architectures tailored for you."},
    {"step": "03", "title": "Build", "desc": "We build and deploy production-grade systems."},
    {"step": "04", "title": "Optimize", "desc": "We optimize for compliance, cost, and sustainable scale."},
]

SUCCESS_TITLE = "Success!"
SUCCESS_TEXT = "Your consultation request has been submitted. We'll be in touch shortly."
ERROR_TITLE = "Something went wrong"


def page_context():
    return {
        "site_name": SITE_NAME,
        "tagline": TAGLINE,
        "contact_email": CONTACT_EMAIL,
        "hero": HERO,
        "services": SERVICES,
        "reasons": REASONS,
        "process": PROCESS,
        "interest_types": INTEREST_TYPES,
        "success_title": SUCCESS_TITLE,
        "success_text": SUCCESS_TEXT,
        "error_title": ERROR_TITLE,
    }
