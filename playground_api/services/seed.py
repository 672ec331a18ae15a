"""Sample profiles inserted into an empty database."""

import structlog

from playground_api.services.profile_store import ProfileStore

logger = structlog.get_logger()


# Emails must stay unique; these go through the normal create path
SAMPLE_PROFILES = [
    {
        "name": "John Doe",
        "email": "john.doe@example.com",
        "education": "Computer Science, MIT",
        "skills": ["JavaScript", "Python", "React", "Node.js"],
        "projects": [
            {
                "title": "E-commerce Platform",
                "description": "Full-stack web application for online shopping",
                "links": ["https://github.com/johndoe/ecommerce", "https://shop-demo.com"],
            },
            {
                "title": "Data Analysis Tool",
                "description": "Python tool for analyzing customer behavior",
                "links": ["https://github.com/johndoe/data-analysis"],
            },
        ],
    },
    {
        "name": "Jane Smith",
        "email": "jane.smith@example.com",
        "education": "Software Engineering, Stanford",
        "skills": ["Python", "Machine Learning", "TensorFlow", "SQL"],
        "projects": [
            {
                "title": "ML Prediction Model",
                "description": "Machine learning model for stock price prediction",
                "links": ["https://github.com/janesmith/ml-stocks"],
            },
            {
                "title": "Web Scraper",
                "description": "Python web scraper for data collection",
                "links": ["https://github.com/janesmith/webscraper"],
            },
        ],
    },
    {
        "name": "Mike Johnson",
        "email": "mike.johnson@example.com",
        "education": "Information Systems, UC Berkeley",
        "skills": ["Java", "Spring Boot", "Docker", "AWS"],
        "projects": [
            {
                "title": "Microservices Architecture",
                "description": "Scalable microservices system using Spring Boot",
                "links": ["https://github.com/mikej/microservices"],
            },
        ],
    },
]


def seed_sample_profiles(store: ProfileStore) -> int:
    """Seed sample profiles if the table is empty.

    Returns:
        Number of profiles inserted
    """
    existing = store.count_profiles()
    if existing:
        logger.info("Database already contains data, skipping seed", count=existing)
        return 0

    logger.info("Seeding database with sample data", count=len(SAMPLE_PROFILES))
    for profile in SAMPLE_PROFILES:
        store.create_profile(profile)

    logger.info("Database seeded successfully")
    return len(SAMPLE_PROFILES)
