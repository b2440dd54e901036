import pytest

from resume2ats.schema_resume import (
    Education,
    Experience,
    PersonalInfo,
    Skill,
    StructuredResume,
)

SAMPLE_RESUME = """\
Jane Doe
Senior Software Engineer
jane.doe@example.com | (555) 123-4567 | linkedin.com/in/janedoe | github.com/janedoe
Austin, TX 78701

Summary
Experienced engineer who led platform teams and delivered reliable Python services.

Experience
Senior Engineer, Acme Corp, Austin, Jan 2020 - Present
• Led a team of 8 engineers
• Reduced infrastructure cost by 30%
Software Engineer | Globex | March 2017 - Dec 2019
- Built payment APIs used by 2 million customers

Education
B.S. Computer Science, University of Texas, 2016

Skills
Python, Go, React, react, PostgreSQL; Docker | Kubernetes

Certifications
AWS Certified Solutions Architect, Amazon, 2021, 2024

Languages
English (Native), Spanish (Fluent)
"""


@pytest.fixture
def sample_text():
    return SAMPLE_RESUME


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "jane.txt"
    path.write_text(SAMPLE_RESUME, encoding="utf-8")
    return path


@pytest.fixture
def strong_resume():
    """Hand-built resume that clears every check."""
    summary = (
        "Backend engineer who led migrations, developed Python services and improved "
        "latency for payment systems. " + "reliable " * 30
    ).strip()
    description = (
        "Increased revenue by 25% and saved $2 million by optimizing checkout for "
        "40 thousand customers. Designed, built and launched the billing platform; "
        "managed a team of six, mentored juniors, streamlined releases and "
        "achieved 99.99% uptime."
    )
    return StructuredResume(
        personal_info=PersonalInfo(
            first_name="Jane",
            last_name="Doe",
            email="jane@example.com",
            phone="+1 555 123 4567",
            location="Austin, TX",
            headline="Staff Backend Engineer",
            summary=summary,
            linkedin_url="https://linkedin.com/in/janedoe",
        ),
        experience=[
            Experience(
                title="Staff Engineer",
                company_name="Acme",
                start_date="2020-01",
                is_current=True,
                description=description + " " + "delivery " * 250,
                achievements=["Cut p99 latency by 40%"],
            ),
        ],
        education=[
            Education(institution="University of Texas", degree="B.S.", end_date="2016-05"),
        ],
        skills=[Skill(name=n, level="ADVANCED") for n in (
            "Python", "Go", "PostgreSQL", "Docker", "Kubernetes", "Kafka", "AWS", "Terraform",
        )],
    )
