"""Canned conversations for demos and tests."""

from datetime import datetime, timedelta, timezone

from convograph.analysis.models import Conversation, ConversationMetadata, Message

SAMPLE_START = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)

_SAMPLES: list[tuple[list[tuple[str, str]], str, list[str]]] = [
    (
        [
            ("user", "Hi! I'm Sarah and I love programming in TypeScript."),
            ("assistant", "Hello Sarah! That's great. TypeScript is a powerful language. What kind of projects do you work on?"),
            ("user", "I mainly work on web applications. I really enjoy using React and Next.js."),
            ("assistant", "Excellent choices! React and Next.js are very popular for modern web development."),
            ("user", "Yeah, and I also like working with graph databases. Neo4j is my favorite."),
            ("assistant", "Graph databases are fascinating! Neo4j is great for modeling complex relationships."),
            ("user", "I'm also interested in AI and machine learning, especially LLMs."),
            ("assistant", "AI and LLMs are incredibly exciting fields right now. Are you working on any AI projects?"),
            ("user", "Yes, I'm building a chatbot that uses Claude API. It's for customer support."),
            ("assistant", "That sounds like a valuable project! Customer support is a great use case for LLMs."),
        ],
        "Programming Interests",
        ["Sarah"],
    ),
    (
        [
            ("user", "I work with my colleague John on most projects."),
            ("assistant", "It's great to have a reliable colleague. What does John specialize in?"),
            ("user", "John is really good at backend development. He knows Python and Go very well."),
            ("assistant", "Python and Go are excellent for backend work. Do you collaborate on the architecture?"),
            ("user", "Yes, we do. My friend Emma also joins us sometimes. She's a UX designer."),
            ("assistant", "Having a UX designer on the team is valuable. Does Emma work on the same projects?"),
            ("user", "Emma mainly works on the frontend design. She's amazing with Figma."),
            ("assistant", "Figma is a powerful design tool. It sounds like you have a well-rounded team!"),
            ("user", "We do! John and Emma actually went to the same university."),
            ("assistant", "That's a nice connection! It probably helps with team dynamics."),
        ],
        "Team and Relationships",
        ["Sarah", "John", "Emma"],
    ),
    (
        [
            ("user", "I really don't like working with legacy PHP code."),
            ("assistant", "Legacy code can be challenging. What makes PHP particularly difficult for you?"),
            ("user", "It's just messy and hard to maintain. I much prefer modern frameworks."),
            ("assistant", "Modern frameworks do tend to have better structure and tooling."),
            ("user", "I also dislike long meetings. They're usually unproductive."),
            ("assistant", "Many people feel that way. Do you prefer asynchronous communication?"),
            ("user", "Yes! I love using Slack and GitHub for async collaboration."),
            ("assistant", "Those are great tools for asynchronous work. What about video calls?"),
            ("user", "I don't mind short video calls, but I prefer them to be under 30 minutes."),
            ("assistant", "That's a reasonable preference. Focused, time-boxed meetings can be effective."),
        ],
        "Work Preferences",
        ["Sarah"],
    ),
    (
        [
            ("user", "Did you know that TypeScript was created by Microsoft?"),
            ("assistant", "Yes! Anders Hejlsberg led the development. He also created C#."),
            ("user", "That's right! TypeScript was first released in 2012."),
            ("assistant", "It's come a long way since then. The type system has become very sophisticated."),
            ("user", "React was created by Facebook, now Meta, in 2013."),
            ("assistant", "Yes, Jordan Walke created it. It revolutionized frontend development."),
            ("user", "I read that Next.js was created by Vercel in 2016."),
            ("assistant", "That's correct! It's become one of the most popular React frameworks."),
        ],
        "Tech History",
        ["Sarah"],
    ),
    (
        [
            ("user", "I started learning programming in 2018."),
            ("assistant", "That's great! What was your first programming language?"),
            ("user", "I started with JavaScript. Then I moved to TypeScript in 2020."),
            ("assistant", "That's a natural progression. TypeScript adds a lot of value to JavaScript."),
            ("user", "I joined my current company in January 2022."),
            ("assistant", "How has your experience been there?"),
            ("user", "It's been great! I got promoted to senior developer in 2023."),
            ("assistant", "Congratulations on the promotion! That's excellent progress."),
            ("user", "Thanks! I'm planning to attend a tech conference in March 2024."),
            ("assistant", "Conferences are great for learning and networking. Which one are you attending?"),
        ],
        "Career Timeline",
        ["Sarah"],
    ),
]


class SampleConversationGenerator:
    """Build conversations with one-minute spaced message timestamps.

    Ids are ``conv_1``, ``conv_2``, ... in creation order per generator.
    """

    def __init__(self, start: datetime = SAMPLE_START) -> None:
        self.start = start
        self._counter = 0

    def generate(self, count: int = 3) -> list[Conversation]:
        """Return up to ``count`` of the built-in sample conversations."""
        return [
            self.custom(turns, topic=topic, participants=participants)
            for turns, topic, participants in _SAMPLES[: max(count, 0)]
        ]

    def custom(
        self,
        turns: list[tuple[str, str]],
        topic: str | None = None,
        participants: list[str] | None = None,
    ) -> Conversation:
        """Build a conversation from (role, content) pairs."""
        messages = [
            Message(
                role=role,
                content=content,
                timestamp=(self.start + timedelta(minutes=i)).isoformat(),
            )
            for i, (role, content) in enumerate(turns)
        ]
        self._counter += 1
        return Conversation(
            id=f"conv_{self._counter}",
            messages=messages,
            metadata=ConversationMetadata(
                created=messages[0].timestamp if messages else self.start.isoformat(),
                topic=topic,
                participants=participants or [],
            ),
        )
