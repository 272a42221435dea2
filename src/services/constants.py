"""
Constants and shared lookup tables for energy estimation and recommendations.
"""
from typing import Dict, List, Tuple
from src.models.profile import Chronotype
from src.models.energy import CyclePhase, EnergyBand
from src.models.recommendation import Activity, ActivityCategory

HOURS_PER_DAY = 24
FORECAST_DAYS = 7
MAX_ACTIVITIES_PER_SLOT = 4

DEFAULT_CIRCADIAN_VALUE = 0.5
DEFAULT_ENERGY_MODIFIER = 1.0

# Daily baseline change (in energy points) needed to report a trend
ENERGY_TREND_THRESHOLD = 5

# Fraction of peak alertness for each hour of the day
CIRCADIAN_CURVES: Dict[Chronotype, Tuple[float, ...]] = {
    Chronotype.MORNING: (
        0.3, 0.3, 0.3, 0.4, 0.5, 0.7, 0.9, 1.0, 0.95, 0.9, 0.85, 0.8,
        0.75, 0.7, 0.65, 0.6, 0.55, 0.5, 0.45, 0.4, 0.35, 0.3, 0.3, 0.3,
    ),
    Chronotype.INTERMEDIATE: (
        0.3, 0.3, 0.3, 0.3, 0.4, 0.5, 0.7, 0.85, 0.95, 1.0, 0.95, 0.9,
        0.85, 0.8, 0.75, 0.7, 0.65, 0.6, 0.55, 0.5, 0.4, 0.35, 0.3, 0.3,
    ),
    Chronotype.EVENING: (
        0.3, 0.3, 0.3, 0.3, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.85, 0.9,
        0.95, 1.0, 0.95, 0.9, 0.85, 0.8, 0.75, 0.7, 0.65, 0.5, 0.4, 0.35,
    ),
}

CHRONOTYPE_LABELS = {
    Chronotype.MORNING: "Early Bird",
    Chronotype.INTERMEDIATE: "Intermediate",
    Chronotype.EVENING: "Night Owl",
}

# Survey thresholds (hour of day) used to classify chronotypes
MORNING_MAX_WAKE_HOUR = 6
MORNING_MAX_PEAK_HOUR = 12
EVENING_MIN_WAKE_HOUR = 9
EVENING_MIN_PEAK_HOUR = 16

# Mapping of zero-based cycle days to phases, checked in order.
# Days past the last range fall into the luteal phase.
CYCLE_PHASE_MAPPING: List[Tuple[int, int, CyclePhase]] = [
    (0, 5, CyclePhase.MENSTRUAL),
    (5, 12, CyclePhase.FOLLICULAR),
    (12, 17, CyclePhase.OVULATORY),
]

CYCLE_ENERGY_MODIFIERS = {
    CyclePhase.MENSTRUAL: 0.7,
    CyclePhase.FOLLICULAR: 1.0,
    CyclePhase.OVULATORY: 1.1,
    CyclePhase.LUTEAL: 0.85,
    CyclePhase.NEUTRAL: DEFAULT_ENERGY_MODIFIER,
}

PHASE_ADVICE = {
    CyclePhase.MENSTRUAL: (
        "Your body is shedding the uterine lining. Energy may be lower, so prioritize rest, "
        "gentle movement, and iron-rich foods. Listen to your body and don't push too hard."
    ),
    CyclePhase.FOLLICULAR: (
        "Rising estrogen boosts energy, mood, and cognitive function. This is an excellent time "
        "for challenging projects, learning new skills, and social activities."
    ),
    CyclePhase.OVULATORY: (
        "Peak estrogen and testosterone levels enhance communication, confidence, and energy. "
        "Ideal for important presentations, negotiations, and social engagements."
    ),
    CyclePhase.LUTEAL: (
        "Progesterone rises, potentially affecting energy and mood. Focus on completing projects, "
        "detail-oriented work, and self-care. Increase magnesium and B-vitamin intake."
    ),
    CyclePhase.NEUTRAL: (
        "Maintain balanced energy throughout the day by staying hydrated, eating regular meals, "
        "and following your natural circadian rhythm."
    ),
}

# Lower bounds (inclusive) of each energy band, highest first
ENERGY_BAND_THRESHOLDS: List[Tuple[int, EnergyBand]] = [
    (80, EnergyBand.PEAK),
    (60, EnergyBand.HIGH),
    (40, EnergyBand.MODERATE),
]

# Upper bounds (exclusive) of the time-of-day names used in rationales
TIME_OF_DAY_BOUNDARIES: List[Tuple[int, str]] = [
    (12, "morning"),
    (17, "afternoon"),
    (21, "evening"),
]
NIGHT = "night"

MORNING_ROUTINE_HOURS = range(5, 8)
SLEEP_PREPARATION_HOURS = frozenset([22, 23, 0, 1, 2, 3, 4])

HOURLY_ACTIVITIES: Dict[EnergyBand, Tuple[Activity, ...]] = {
    EnergyBand.PEAK: (
        Activity(
            name="Deep Work",
            description="Tackle your most challenging tasks requiring intense focus",
            category=ActivityCategory.FOCUS,
            icon="brain",
        ),
        Activity(
            name="Strategic Planning",
            description="Make important decisions and plan long-term goals",
            category=ActivityCategory.FOCUS,
            icon="target",
        ),
        Activity(
            name="Learning New Skills",
            description="Your brain is primed for absorbing new information",
            category=ActivityCategory.FOCUS,
            icon="book-open",
        ),
    ),
    EnergyBand.HIGH: (
        Activity(
            name="Creative Work",
            description="Brainstorm, write, design, or work on creative projects",
            category=ActivityCategory.CREATIVE,
            icon="lightbulb",
        ),
        Activity(
            name="Moderate Exercise",
            description="Go for a run, hit the gym, or take a fitness class",
            category=ActivityCategory.EXERCISE,
            icon="activity",
        ),
        Activity(
            name="Team Collaboration",
            description="Participate in meetings and collaborative work",
            category=ActivityCategory.SOCIAL,
            icon="users",
        ),
        Activity(
            name="Problem Solving",
            description="Work through challenges that require logical thinking",
            category=ActivityCategory.FOCUS,
            icon="puzzle",
        ),
    ),
    EnergyBand.MODERATE: (
        Activity(
            name="Routine Tasks",
            description="Handle emails, organize, and complete admin work",
            category=ActivityCategory.ROUTINE,
            icon="check-square",
        ),
        Activity(
            name="Light Exercise",
            description="Gentle yoga, walking, or stretching",
            category=ActivityCategory.EXERCISE,
            icon="move",
        ),
        Activity(
            name="Reading",
            description="Catch up on articles, reports, or light reading",
            category=ActivityCategory.CREATIVE,
            icon="book",
        ),
    ),
    EnergyBand.LOW: (
        Activity(
            name="Rest & Recovery",
            description="Take breaks, meditate, or practice mindfulness",
            category=ActivityCategory.REST,
            icon="moon",
        ),
        Activity(
            name="Light Activities",
            description="Gentle tasks that don't require much mental energy",
            category=ActivityCategory.ROUTINE,
            icon="coffee",
        ),
        Activity(
            name="Reflection",
            description="Journal, reflect, or plan for tomorrow",
            category=ActivityCategory.REST,
            icon="pen-tool",
        ),
    ),
}

SOCIAL_NETWORKING = Activity(
    name="Social Networking",
    description="Connect with others, attend meetings, or collaborate",
    category=ActivityCategory.SOCIAL,
    icon="users",
)

SELF_CARE = Activity(
    name="Self-Care",
    description="Focus on activities that nurture and restore you",
    category=ActivityCategory.REST,
    icon="heart",
)

MORNING_ROUTINE = Activity(
    name="Morning Routine",
    description="Hydrate, eat a nutritious breakfast, and set intentions",
    category=ActivityCategory.ROUTINE,
    icon="sunrise",
)

SLEEP_PREPARATION = Activity(
    name="Sleep Preparation",
    description="Wind down, dim lights, and prepare for quality sleep",
    category=ActivityCategory.REST,
    icon="moon",
)

# Phase-conditional extras appended after the base set: (band, phases, activity)
PHASE_ACTIVITY_EXTRAS: List[Tuple[EnergyBand, frozenset, Activity]] = [
    (EnergyBand.PEAK, frozenset([CyclePhase.OVULATORY, CyclePhase.FOLLICULAR]), SOCIAL_NETWORKING),
    (EnergyBand.MODERATE, frozenset([CyclePhase.MENSTRUAL]), SELF_CARE),
]

RATIONALE_TEMPLATES = {
    EnergyBand.PEAK: (
        "Your peak performance window in the {time_of_day}. "
        "Cortisol and cognitive function are optimized for complex tasks."
    ),
    EnergyBand.HIGH: (
        "Good energy levels in the {time_of_day}. "
        "Your brain is alert and ready for productive work."
    ),
    EnergyBand.MODERATE: (
        "Moderate energy in the {time_of_day}. "
        "Best for lighter tasks and maintaining momentum."
    ),
    EnergyBand.LOW: (
        "Lower energy in the {time_of_day}. "
        "Your body and mind benefit from rest and recovery activities."
    ),
}

DAILY_ACTIVITIES_BY_ENERGY = {
    EnergyBand.PEAK: ("HIIT workout", "Team sports", "Complex projects"),
    EnergyBand.HIGH: ("Cardio", "Social meetings", "Creative work"),
    EnergyBand.MODERATE: ("Walking", "Light yoga", "Administrative tasks"),
    EnergyBand.LOW: ("Meditation", "Rest", "Light reading"),
}

DAILY_FOODS_BY_ENERGY = {
    EnergyBand.PEAK: ("Lean proteins", "Complex carbs", "Healthy fats"),
    EnergyBand.HIGH: ("Whole grains", "Vegetables", "Nuts"),
    EnergyBand.MODERATE: ("Light meals", "Fruits", "Green tea"),
    EnergyBand.LOW: ("Warm soups", "Herbal tea", "Easy-to-digest foods"),
}

DAILY_FOODS_BY_PHASE = {
    CyclePhase.MENSTRUAL: ("Iron-rich foods", "Leafy greens", "Dark chocolate"),
    CyclePhase.FOLLICULAR: ("Whole grains", "Lean proteins", "Fresh fruits"),
    CyclePhase.OVULATORY: ("Colorful vegetables", "Omega-3 rich fish", "Berries"),
    CyclePhase.LUTEAL: ("Complex carbs", "Magnesium-rich foods", "Herbal tea"),
}

# Foods for phase values outside the known set
DEFAULT_DAILY_FOODS = ("Balanced meals", "Hydration", "Nutrient-dense foods")

# Phases whose activities replace the energy-based list entirely
DAILY_ACTIVITIES_BY_PHASE = {
    CyclePhase.FOLLICULAR: ("Strength training", "New challenges", "Social activities"),
    CyclePhase.OVULATORY: ("High-intensity workouts", "Important meetings", "Public speaking"),
    CyclePhase.LUTEAL: ("Moderate exercise", "Detail-oriented work", "Planning sessions"),
}

# Menstrual days keep the energy-based list minus high intensity work, plus recovery
MENSTRUAL_EXCLUDED_ACTIVITY = "HIIT"
MENSTRUAL_RECOVERY_ACTIVITIES = ("Gentle stretching", "Restorative yoga")
