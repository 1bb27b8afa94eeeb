"""
Data Module - Static portfolio content
Profile, projects and skills shown on the public pages
"""

from models import Profile, Project, Skill


PROFILE = Profile(
    name='Kedhar Vishnu',
    headline='Java Developer | Software Engineer | Cloud Enthusiast',
    email='kedharvishnu0@gmail.com',
    phone='+91 98666 93568',
    resume_filename='Kedhar_Vishnu_Developer.pdf',
)

PROJECTS = (
    Project(
        title='Bank of America',
        company='Tata Consultancy Services',
        domain='Banking',
        description=(
            'Migrated a monolithic banking app to microservices. Implemented '
            'Spring Security with OAuth2.0 & JWT, Apache Kafka messaging, and '
            'resiliency patterns. Improved reliability and modularity.'
        ),
        tech='Java, Spring Boot, Microservices, Kafka, SQL, Git, Bitbucket, Autosys',
    ),
    Project(
        title='ASML',
        company='Tata Consultancy Services',
        domain='Semiconductor',
        description=(
            'Built data pipelines for microchip sales & shipment data using '
            'Azure Data Factory and Databricks. Upgraded JDK 1.7 → 17, deployed '
            'apps on AWS EKS, and implemented database migration with Liquibase.'
        ),
        tech='Azure Data Factory, Databricks, SQL, AWS EKS, React, Liquibase',
    ),
)

SKILLS = (
    Skill('Java', 'Expert'),
    Skill('Spring Boot & Microservices', 'Expert'),
    Skill('React.js', 'Intermediate'),
    Skill('AWS & Cloud', 'Intermediate'),
    Skill('SQL / Databases', 'Advanced'),
    Skill('ETL / Azure Data Factory', 'Intermediate'),
    Skill('Git / Maven / CI-CD', 'Advanced'),
)


def get_profile():
    """Return the portfolio owner's profile"""
    return PROFILE


def get_projects():
    """Return the projects in display order"""
    return PROJECTS


def get_skills():
    """Return the skills in display order"""
    return SKILLS


def get_global_meta():
    """Default meta tags for SEO"""
    return {
        'title': f'{PROFILE.name} | Portfolio',
        'description': f'{PROFILE.name} - {PROFILE.headline}',
        'keywords': 'Kedhar Vishnu, Java Developer, Spring Boot, Microservices, Portfolio'
    }
