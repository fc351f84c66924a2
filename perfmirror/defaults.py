"""Seed data: default weight profiles, target, level expectations and templates."""

from __future__ import annotations

from perfmirror.models import (
    CategoryTemplate,
    LevelExpectation,
    PerformanceTarget,
    RoleWeightProfile,
    TemplateIndex,
)


# ---------------------------------------------------------------------------
# Weight profiles and target
# ---------------------------------------------------------------------------
def create_default_weight_profiles() -> list[RoleWeightProfile]:
    """Four stock profiles; ``Manager`` starts active."""
    return [
        RoleWeightProfile(
            id="engineer",
            name="Engineer",
            role="IC",
            input_weight=0.3,
            output_weight=0.4,
            outcome_weight=0.2,
            impact_weight=0.1,
        ),
        RoleWeightProfile(
            id="manager",
            name="Manager",
            role="Manager",
            input_weight=0.2,
            output_weight=0.4,
            outcome_weight=0.3,
            impact_weight=0.1,
            is_active=True,
        ),
        RoleWeightProfile(
            id="senior_manager",
            name="Senior Manager",
            role="Manager",
            input_weight=0.15,
            output_weight=0.35,
            outcome_weight=0.35,
            impact_weight=0.15,
        ),
        RoleWeightProfile(
            id="director",
            name="Director",
            role="Manager",
            input_weight=0.1,
            output_weight=0.25,
            outcome_weight=0.4,
            impact_weight=0.25,
        ),
    ]


def create_default_target() -> PerformanceTarget:
    return PerformanceTarget(
        id="default",
        name="Default Target",
        outstanding_threshold=300,
        strong_threshold=230,
        meeting_threshold=170,
        partial_threshold=140,
        underperforming_threshold=120,
        time_period_weeks=12,
        is_active=True,
    )


# ---------------------------------------------------------------------------
# Level expectations
# ---------------------------------------------------------------------------
_EXPECTATIONS: dict[tuple[str, int], list[str]] = {
    ("IC", 1): [
        "Should learn and adapt to team processes quickly",
        "Should ask questions when unclear and seek guidance",
        "Should complete assigned tasks with support",
        "Should participate in team meetings and discussions",
    ],
    ("IC", 2): [
        "Should work independently on small tasks",
        "Should contribute to code reviews with basic feedback",
        "Should identify and escalate blockers appropriately",
        "Should demonstrate basic understanding of team goals",
    ],
    ("IC", 3): [
        "Should complete small- to medium-sized tasks reliably",
        "Should participate in code reviews regularly",
        "Should ask for support when blocked",
        "Should demonstrate basic ownership over their work",
        "Should contribute to team discussions with relevant insights",
    ],
    ("IC", 4): [
        "Should handle complex tasks independently",
        "Should provide thoughtful code review feedback",
        "Should mentor junior team members",
        "Should drive small projects from conception to completion",
        "Should identify and propose process improvements",
    ],
    ("IC", 5): [
        "Should lead technical initiatives and projects",
        "Should architect solutions for complex problems",
        "Should mentor and guide other engineers",
        "Should drive cross-team collaboration when needed",
        "Should contribute to technical strategy and roadmap",
        "Should identify and address technical debt proactively",
    ],
    ("IC", 6): [
        "Should lead large, complex technical initiatives",
        "Should set technical direction for the team",
        "Should influence engineering practices across teams",
        "Should identify and solve systemic technical challenges",
        "Should mentor other senior engineers",
        "Should drive significant architectural decisions",
    ],
    ("IC", 7): [
        "Should lead organization-wide technical initiatives",
        "Should drive technical strategy and vision",
        "Should influence engineering culture and practices",
        "Should solve complex, ambiguous technical problems",
        "Should mentor and develop other technical leaders",
        "Should represent the organization in technical discussions",
    ],
    ("IC", 8): [
        "Should set technical direction for the entire organization",
        "Should drive industry-leading technical innovations",
        "Should influence engineering practices across the industry",
        "Should solve the most complex technical challenges",
        "Should develop and mentor other principal engineers",
        "Should represent the organization as a technical thought leader",
    ],
    ("Manager", 4): [
        "Should manage a small team effectively",
        "Should conduct regular 1:1s and provide feedback",
        "Should help team members grow and develop",
        "Should ensure team delivery against commitments",
        "Should collaborate with other teams and stakeholders",
    ],
    ("Manager", 5): [
        "Should manage larger teams or multiple teams",
        "Should develop and execute team strategy",
        "Should identify and develop high-potential team members",
        "Should drive cross-functional initiatives",
        "Should contribute to organizational planning and strategy",
        "Should manage team performance and address issues",
    ],
    ("Manager", 6): [
        "Should manage managers and larger organizations",
        "Should set strategic direction for their area",
        "Should drive organizational change and transformation",
        "Should develop other managers and leaders",
        "Should influence company-wide decisions",
        "Should represent the organization to external stakeholders",
    ],
    ("Manager", 7): [
        "Should lead large organizations or critical functions",
        "Should set company-wide strategic initiatives",
        "Should drive cultural change and transformation",
        "Should develop executive leadership pipeline",
        "Should influence industry practices and standards",
        "Should represent the company at the highest levels",
    ],
    ("Manager", 8): [
        "Should lead major business units or functions",
        "Should set company vision and strategy",
        "Should drive company-wide transformation",
        "Should develop other executives and leaders",
        "Should influence industry direction and standards",
        "Should represent the company as a thought leader",
    ],
}

DEFAULT_LEVEL_EXPECTATIONS: dict[tuple[str, int], LevelExpectation] = {
    (role, level): LevelExpectation(role=role, level=level, expectations=items)
    for (role, level), items in _EXPECTATIONS.items()
}


# ---------------------------------------------------------------------------
# Category templates
# ---------------------------------------------------------------------------
def _tpl(
    role: str,
    level: int,
    name: str,
    dimension: str,
    points: int,
    weekly: float,
    description: str,
) -> CategoryTemplate:
    return CategoryTemplate(
        role=role,
        level=level,
        category_name=name,
        dimension=dimension,
        score_per_occurrence=points,
        expected_weekly_count=weekly,
        description=description,
    )


DEFAULT_CATEGORY_TEMPLATES = TemplateIndex(templates=[
    # IC L3
    _tpl("IC", 3, "Code Reviews", "input", 5, 8, "Providing feedback on code changes"),
    _tpl("IC", 3, "Feature Development", "output", 15, 2, "Completing feature development tasks"),
    _tpl("IC", 3, "Bug Fixes", "output", 8, 3, "Resolving software defects"),
    _tpl("IC", 3, "Team Meetings", "input", 3, 5, "Participating in team meetings and discussions"),
    _tpl("IC", 3, "User Story Completion", "outcome", 20, 2, "Delivering completed user stories"),
    # IC L4
    _tpl("IC", 4, "Code Reviews", "input", 6, 8, "Thoughtful feedback on code changes"),
    _tpl("IC", 4, "Feature Development", "output", 20, 2, "Owning complex feature work"),
    _tpl("IC", 4, "Mentoring Sessions", "input", 8, 1, "Mentoring junior team members"),
    _tpl("IC", 4, "Process Improvements", "outcome", 25, 0.5, "Proposing and landing process improvements"),
    # IC L5
    _tpl("IC", 5, "Technical Design", "output", 25, 1, "Creating technical designs and architecture"),
    _tpl("IC", 5, "Code Review Leadership", "input", 8, 10, "Leading code review processes"),
    _tpl("IC", 5, "Mentoring Sessions", "input", 10, 3, "Mentoring junior engineers"),
    _tpl("IC", 5, "Project Delivery", "outcome", 40, 0.5, "Delivering complex projects"),
    _tpl("IC", 5, "Cross-team Collaboration", "input", 15, 2, "Collaborating with other teams"),
    _tpl("IC", 5, "Technical Innovation", "impact", 50, 0.25, "Driving technical innovation and improvements"),
    # IC L6
    _tpl("IC", 6, "Architecture Decisions", "output", 30, 1, "Driving significant architectural decisions"),
    _tpl("IC", 6, "Senior Mentoring", "input", 12, 3, "Mentoring other senior engineers"),
    _tpl("IC", 6, "Engineering Practices", "impact", 40, 0.5, "Influencing engineering practices across teams"),
    # IC L7
    _tpl("IC", 7, "Technical Strategy", "impact", 75, 0.5, "Defining technical strategy and direction"),
    _tpl("IC", 7, "Architecture Reviews", "input", 20, 3, "Reviewing and approving architectural decisions"),
    _tpl("IC", 7, "Senior Mentoring", "input", 15, 4, "Mentoring senior engineers and tech leads"),
    _tpl("IC", 7, "Organizational Initiatives", "impact", 100, 0.25, "Leading organization-wide technical initiatives"),
    _tpl("IC", 7, "External Representation", "impact", 30, 1, "Representing the organization externally"),
    # Manager L4
    _tpl("Manager", 4, "One-on-Ones", "input", 10, 6, "Conducting regular 1:1 meetings with team members"),
    _tpl("Manager", 4, "Team Planning", "output", 15, 2, "Planning team work and priorities"),
    _tpl("Manager", 4, "Performance Reviews", "input", 20, 0.5, "Conducting performance reviews and feedback"),
    _tpl("Manager", 4, "Team Deliverables", "outcome", 30, 1, "Ensuring team meets delivery commitments"),
    _tpl("Manager", 4, "Stakeholder Meetings", "input", 12, 3, "Meeting with stakeholders and partners"),
    # Manager L5
    _tpl("Manager", 5, "Team Strategy", "outcome", 35, 0.5, "Developing and executing team strategy"),
    _tpl("Manager", 5, "Talent Development", "input", 15, 2, "Developing high-potential team members"),
    _tpl("Manager", 5, "Cross-functional Coordination", "output", 20, 2, "Driving cross-functional initiatives"),
    # Manager L6
    _tpl("Manager", 6, "Strategic Planning", "impact", 50, 1, "Developing strategic plans and initiatives"),
    _tpl("Manager", 6, "Manager Development", "input", 25, 2, "Developing and mentoring other managers"),
    _tpl("Manager", 6, "Cross-functional Leadership", "input", 20, 4, "Leading cross-functional initiatives"),
    _tpl("Manager", 6, "Organizational Change", "impact", 75, 0.5, "Driving organizational change and transformation"),
    _tpl("Manager", 6, "Executive Reporting", "output", 30, 1, "Reporting to executive leadership"),
])


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------
def get_level_expectations(role: str, level: int) -> list[str]:
    """Default expectation statements for *role* at *level* (``[]`` if none)."""
    record = DEFAULT_LEVEL_EXPECTATIONS.get((role, level))
    return list(record.expectations) if record else []


def get_category_templates(role: str, level: int) -> list[CategoryTemplate]:
    return DEFAULT_CATEGORY_TEMPLATES.for_level(role, level)
