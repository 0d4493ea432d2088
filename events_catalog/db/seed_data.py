"""Demonstration dataset used to reset the catalog.

Every fixture satisfies the event validation rules: offline events carry a
venue and an address, online events carry neither.
"""

import logging
from datetime import date
from typing import Any, Dict, List

from ..models.fields import EventFields

logger = logging.getLogger(__name__)

SEED_EVENTS: List[Dict[str, Any]] = [
    {
        'title': 'Tech Conference 2023',
        'type': 'Offline',
        'date': date(2023, 7, 13),
        'time': '09:00 AM - 05:00 PM',
        'image': 'https://picsum.photos/seed/techconf/400/300.jpg',
        'hostedBy': 'Tech Innovators Inc.',
        'venue': 'Convention Center',
        'address': '123 Main St, Tech City',
        'ticketPrice': 150,
        'speakers': [
            {
                'name': 'Alice Future',
                'title': 'CEO of Tomorrow',
                'image': 'https://picsum.photos/seed/alice/200/200.jpg',
            },
            {
                'name': 'Bob Tech',
                'title': 'CTO of InnovateTech',
                'image': 'https://picsum.photos/seed/bob/200/200.jpg',
            },
        ],
        'description': (
            'Join us for a full-day conference on the latest in technology, featuring keynotes '
            'from industry leaders. Sessions cover AI, blockchain and quantum computing, with '
            'panel discussions, workshops and networking. Lunch and refreshments are provided.'
        ),
        'tags': ['Technology', 'Networking', 'Innovation'],
        'dressCode': 'Business Formal',
        'ageRestriction': '18+',
    },
    {
        'title': 'Design Workshop',
        'type': 'Offline',
        'date': date(2023, 7, 10),
        'time': '10:00 AM - 04:00 PM',
        'image': 'https://picsum.photos/seed/designwork/400/300.jpg',
        'hostedBy': 'Creative Minds',
        'venue': 'Art Studio',
        'address': '456 Creative Lane, Design City',
        'ticketPrice': 75,
        'speakers': [
            {
                'name': 'Bob Palette',
                'title': 'UI/UX Master',
                'image': 'https://picsum.photos/seed/bobdesign/200/200.jpg',
            },
        ],
        'description': (
            'Hands-on workshop covering modern design principles and tools: color theory, '
            'typography, layout, user experience and design thinking. Participants work on '
            'real-world projects and receive personal feedback. All materials are provided.'
        ),
        'tags': ['Design', 'UI/UX', 'Workshop'],
        'dressCode': 'Smart Casual',
        'ageRestriction': '16+',
    },
    {
        'title': 'Marketing Seminar',
        'type': 'Offline',
        'date': date(2023, 8, 15),
        'time': '10:00 AM - 12:00 PM',
        'image': 'https://picsum.photos/seed/marketsem/400/300.jpg',
        'hostedBy': 'Marketing Experts',
        'venue': 'Marketing City',
        'address': '789 Marketing Avenue, City',
        'ticketPrice': 3000,
        'speakers': [
            {
                'name': 'Sarah Johnson',
                'title': 'Market Manager',
                'image': 'https://picsum.photos/seed/sarah/200/200.jpg',
            },
            {
                'name': 'Michael Brown',
                'title': 'SEO Expert',
                'image': 'https://picsum.photos/seed/michael/200/200.jpg',
            },
        ],
        'description': (
            'An insightful seminar on modern marketing strategies, SEO and brand growth, '
            'covering social media, content and email marketing. Participants receive a '
            'certificate of completion and access to exclusive marketing resources.'
        ),
        'tags': ['Marketing', 'SEO', 'Branding'],
        'dressCode': 'Smart Casual',
        'ageRestriction': '18 years and above',
    },
    {
        'title': 'React Online Summit',
        'type': 'Online',
        'date': date(2023, 9, 20),
        'time': '02:00 PM - 06:00 PM GMT',
        'image': 'https://picsum.photos/seed/reactsummit/400/300.jpg',
        'hostedBy': 'React Community',
        'ticketPrice': 0,
        'speakers': [
            {
                'name': 'Dan Abramov',
                'title': 'Core React Team',
                'image': 'https://picsum.photos/seed/dan/200/200.jpg',
            },
        ],
        'description': (
            'A free online summit covering the latest features and best practices in React: '
            'hooks, the context API, performance and testing, with live Q&A sessions.'
        ),
        'tags': ['React', 'JavaScript', 'Frontend', 'Online'],
        'dressCode': 'Casual',
        'ageRestriction': 'None',
    },
    {
        'title': 'AI & Machine Learning Expo',
        'type': 'Offline',
        'date': date(2023, 10, 5),
        'time': '09:30 AM - 06:30 PM',
        'image': 'https://picsum.photos/seed/aiexpo/400/300.jpg',
        'hostedBy': 'AI Innovations Lab',
        'venue': 'Tech Hub Convention Center',
        'address': '321 Innovation Boulevard, Silicon Valley',
        'ticketPrice': 250,
        'speakers': [
            {
                'name': 'Dr. Emily Chen',
                'title': 'AI Research Director',
                'image': 'https://picsum.photos/seed/emily/200/200.jpg',
            },
            {
                'name': 'Prof. James Wilson',
                'title': 'Machine Learning Expert',
                'image': 'https://picsum.photos/seed/james/200/200.jpg',
            },
            {
                'name': 'Alex Kumar',
                'title': 'Deep Learning Engineer',
                'image': 'https://picsum.photos/seed/alex/200/200.jpg',
            },
        ],
        'description': (
            'Explore cutting-edge developments in artificial intelligence and machine learning: '
            'neural networks, natural language processing, computer vision and ethical AI. '
            'Keynotes, hands-on workshops and an exhibition of the latest AI technologies.'
        ),
        'tags': ['AI', 'Machine Learning', 'Technology', 'Innovation'],
        'dressCode': 'Business Casual',
        'ageRestriction': '18+',
    },
    {
        'title': 'Startup Pitch Night',
        'type': 'Offline',
        'date': date(2023, 11, 12),
        'time': '06:00 PM - 09:00 PM',
        'image': 'https://picsum.photos/seed/startupnight/400/300.jpg',
        'hostedBy': 'Entrepreneurship Hub',
        'venue': 'Innovation Center',
        'address': '567 Business Park Drive, Startup City',
        'ticketPrice': 25,
        'speakers': [
            {
                'name': 'Jessica Martinez',
                'title': 'Venture Capitalist',
                'image': 'https://picsum.photos/seed/jessica/200/200.jpg',
            },
            {
                'name': 'David Lee',
                'title': 'Serial Entrepreneur',
                'image': 'https://picsum.photos/seed/david/200/200.jpg',
            },
        ],
        'description': (
            'An evening where startups pitch their ideas to a panel of investors and industry '
            'experts, followed by networking with founders, investors and business mentors.'
        ),
        'tags': ['Startup', 'Entrepreneurship', 'Pitching', 'Networking'],
        'dressCode': 'Business Casual',
        'ageRestriction': '21+',
    },
    {
        'title': 'Open Source Coding Hour',
        'type': 'Online',
        'date': date(2023, 12, 2),
        'time': '05:00 PM - 06:00 PM GMT',
        'image': 'https://picsum.photos/seed/codinghour/400/300.jpg',
        'hostedBy': 'Open Source Collective',
        'ticketPrice': 0,
        'speakers': [],
        'description': (
            'A relaxed online session where contributors pick up beginner-friendly issues '
            'together. No talks, just pairing and code review.'
        ),
        'tags': ['Open Source', 'Community', 'Online'],
    },
]


def seed_dataset() -> List[EventFields]:
    """The seed fixtures as payload models, in a fixed order."""
    return [EventFields.model_validate(fixture) for fixture in SEED_EVENTS]


def seed_events(repository) -> List[Dict[str, Any]]:
    """Reset the catalog to the seed dataset and return the inserted events."""
    events = repository.replace_all(seed_dataset())
    logger.info(f"Seeded {len(events)} events")
    return events
