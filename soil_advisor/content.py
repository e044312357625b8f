"""Fixed copy for the home, FAQ and recommendations pages."""

HERO_TITLE = "Get Crop Advice Based on Your Soil Type"
HERO_TEXT = (
    "Use our AI-powered tool to analyze your soil conditions and receive personalized crop recommendations "
    "that maximize yield, profitability, and sustainability for your land."
)

FEATURES = [
    ("🎯", "Precision Matching", "Match crops perfectly to your soil's texture, pH, and nutrient profile"),
    ("📈", "Yield Optimization", "Get yield estimates and profitability forecasts for each recommended crop"),
    ("🛡️", "Sustainability Focus", "Recommendations prioritize long-term soil health and environmental impact"),
    ("🌱", "Expert Guidance", "Receive soil health tips and growing advice from agricultural experts"),
]

HOW_IT_WORKS = [
    ("Input Soil Data", "Enter your soil texture, pH level, moisture content, and nutrient availability"),
    ("AI Analysis", "Our algorithm analyzes your data against crop requirements and regional conditions"),
    ("Get Recommendations", "Receive personalized crop suggestions with yield estimates and growing tips"),
]

# tooltips on the input form
FIELD_HELP = {
    "texture": "The physical composition of your soil (sand, silt, clay ratio)",
    "ph": "pH scale from 4.0 (very acidic) to 10.0 (very alkaline). Most crops prefer 6.0-7.5.",
    "moisture_level": "Current moisture condition of your soil",
    "water_availability": "Your access to irrigation and water sources",
    "nutrients": "Select any known nutrient deficiencies in your soil",
}

CONSIDERATIONS = [
    "These recommendations are based on general soil conditions",
    "Conduct a detailed soil test for precise nutrient analysis",
    "Consider local climate patterns and market conditions",
    "Consult with local agricultural extension services",
    "Plan crop rotation to maintain soil health",
]

FAQS = [
    (
        "How accurate are these crop recommendations?",
        "Our AI-powered recommendations are based on extensive agricultural research and data from successful "
        "farms worldwide. However, local conditions, climate variations, and market factors should also be "
        "considered. We recommend using these suggestions as a starting point and consulting with local "
        "agricultural experts for final decisions.",
    ),
    (
        "Do I need a professional soil test?",
        "While our tool provides valuable insights based on basic soil information, a professional soil test will "
        "give you precise nutrient levels, pH measurements, and other detailed characteristics. For best results, "
        "combine our recommendations with professional soil analysis, especially for commercial farming operations.",
    ),
    (
        "How does climate affect crop recommendations?",
        "Climate is crucial for crop success. Our recommendations consider your regional climate, but local "
        "microclimates, seasonal weather patterns, and climate change effects should be evaluated. Monitor local "
        "weather forecasts and historical climate data when planning your crops.",
    ),
    (
        "Should I rotate crops each season?",
        "Yes, crop rotation is essential for maintaining soil health, preventing pest buildup, and optimizing "
        "nutrient use. Different crops have varying nutrient needs and pest susceptibilities. Plan a 3-4 year "
        "rotation cycle including legumes to naturally fix nitrogen in the soil.",
    ),
    (
        "Are these recommendations suitable for organic farming?",
        "Our recommendations work for both conventional and organic farming. For organic operations, focus on "
        "natural soil amendments, biological pest control, and certified organic seeds. The crop suitability "
        "remains the same, but growing methods will differ.",
    ),
    (
        "Are these recommendations suitable for small-scale or home gardening?",
        "Absolutely! Our recommendations work for any scale, from backyard gardens to commercial farms. For "
        "smaller areas, you can often improve soil conditions more easily and try multiple crops to see what "
        "works best in your specific location.",
    ),
    (
        "How important is water management?",
        "Water management is critical for crop success. Consider installing efficient irrigation systems, "
        "mulching to retain moisture, and choosing crops that match your water availability. Drought-resistant "
        "varieties are excellent for areas with limited water access.",
    ),
    (
        "How do I know if a crop will be profitable?",
        "Research local market prices, demand trends, and production costs. Consider factors like storage "
        "requirements, transportation, and processing needs. Start with smaller plots to test market response "
        "before scaling up production.",
    ),
    (
        "How do I handle pests and diseases?",
        "Implement integrated pest management (IPM) strategies: monitor regularly, use biological controls, "
        "maintain crop diversity, and apply targeted treatments only when necessary. Healthy soil and proper "
        "plant nutrition help crops resist diseases naturally.",
    ),
    (
        "What about fertilization and soil amendments?",
        "Base fertilization on soil test results and crop requirements. Use organic matter like compost to "
        "improve soil structure. Apply fertilizers in split applications during the growing season rather than "
        "all at once. Consider slow-release fertilizers for sustained nutrition.",
    ),
]

PROFITABILITY_BADGE = {"High": "🟢 High", "Medium": "🟡 Medium", "Low": "🔴 Low"}


def display_value(value: str) -> str:
    """'very-dry' -> 'Very Dry'."""
    return value.replace("-", " ").title() if value else "n/a"
