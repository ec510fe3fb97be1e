"""
Default values for parsed résumés.

Renderers expect a non-degenerate document: a name, contact details, at
least one job, one school and some skills. Whatever the parser could not
find is filled from here after the forward pass. links, projects, location
and summary are never defaulted.
"""

from dataclasses import replace

from resume_roaster.contexts.intake.resume_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ParsedResume,
)

DEFAULT_CONTACT = {
    "name": "张三",
    "title": "软件工程师",
    "email": "example@email.com",
    "phone": "138-0000-0000",
}

DEFAULT_EXPERIENCE = ExperienceEntry(
    company="某科技公司",
    role="高级工程师",
    period="2021.06 - 至今",
    location="北京",
    highlights=(
        "主导核心业务系统重构，服务 QPS 提升 300%",
        "设计并实现分布式缓存方案，系统可用性达到 99.99%",
    ),
)

DEFAULT_EDUCATION = EducationEntry(
    school="某某大学",
    degree="本科",
    major="计算机科学与技术",
    period="2017.09 - 2021.06",
)

DEFAULT_SKILLS = ("Java", "Spring Boot", "MySQL", "Redis")


def apply_defaults(resume: ParsedResume) -> tuple[ParsedResume, list[str]]:
    """
    Fill empty required fields with placeholder values.

    A field that already holds any truthy value is never touched.

    Args:
        resume: Result of the forward pass

    Returns:
        (resume with defaults applied, names of the fields that were defaulted)
    """
    changes = {}

    for field_name, placeholder in DEFAULT_CONTACT.items():
        if not getattr(resume, field_name):
            changes[field_name] = placeholder

    if not resume.experience:
        changes["experience"] = (DEFAULT_EXPERIENCE,)

    if not resume.education:
        changes["education"] = (DEFAULT_EDUCATION,)

    if not resume.skills:
        changes["skills"] = DEFAULT_SKILLS

    if not changes:
        return resume, []

    return replace(resume, **changes), list(changes)
