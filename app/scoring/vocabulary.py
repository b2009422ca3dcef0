from __future__ import annotations

STOPWORDS: frozenset[str] = frozenset(
    {
        # Articles, pronouns, determiners
        "a", "an", "the", "this", "that", "these", "those", "i", "you", "your", "we", "our",
        "they", "them", "their", "he", "she", "his", "her", "it", "its", "who", "whom", "which",
        "what", "when", "where", "why", "how", "all", "any", "both", "each", "few", "more",
        "most", "other", "some", "such", "own", "same",
        # Modals / auxiliaries
        "are", "is", "was", "were", "be", "been", "being", "has", "have", "had", "does", "did",
        "can", "will", "would", "could", "should", "may", "might", "must", "shall",
        # Prepositions / conjunctions
        "and", "as", "at", "by", "for", "from", "in", "of", "on", "to", "with", "into", "about",
        "but", "nor", "not", "no", "only", "so", "than", "too", "very", "just", "now", "also",
        "then", "there", "here", "out", "over", "under", "upon", "via", "while", "within", "per",
        "etc",
    }
)

# Literal substrings checked against the lowercased JD and resume.
TECHNICAL_TERMS: tuple[str, ...] = (
    "javascript",
    "python",
    "java",
    "react",
    "node.js",
    "sql",
    "mongodb",
    "aws",
    "docker",
    "kubernetes",
    "git",
    "html",
    "css",
    "typescript",
    "angular",
    "vue",
    "express",
    "django",
    "flask",
    "spring",
    "hibernate",
    "postgresql",
    "mysql",
    "redis",
    "elasticsearch",
    "kafka",
    "rabbitmq",
    "jenkins",
    "ci/cd",
    "agile",
    "scrum",
    "kanban",
    "rest",
    "graphql",
    "microservices",
    "api",
    "frontend",
    "backend",
    "fullstack",
    "devops",
    "cloud",
    "serverless",
    "lambda",
    "ec2",
    "s3",
    "rds",
    "elastic",
    "terraform",
    "ansible",
)

EXPERIENCE_TERMS: tuple[str, ...] = (
    "experience",
    "years",
    "senior",
    "junior",
    "lead",
    "manager",
    "developer",
    "engineer",
    "architect",
    "consultant",
    "specialist",
    "analyst",
    "coordinator",
    "supervisor",
    "director",
    "vp",
    "cto",
    "ceo",
    "founder",
    "co-founder",
)

SUMMARY_TERMS: tuple[str, ...] = (
    "bachelor",
    "master",
    "phd",
    "degree",
    "certification",
    "certified",
    "expertise",
    "proficient",
    "skilled",
    "knowledgeable",
    "experienced",
    "proven",
    "track record",
    "successful",
    "results",
    "achieved",
    "delivered",
)

# Applied case-insensitively to resume text only, in this order.
COMPOUND_TERM_REWRITES: tuple[tuple[str, str], ...] = (
    ("full-stack", "full stack"),
    ("fullstack", "full stack"),
    ("front-end", "front end"),
    ("back-end", "back end"),
    ("dev-ops", "dev ops"),
    ("devops", "dev ops"),
    ("dev/ops", "dev ops"),
    ("ci/cd", "ci cd"),
    ("ci-cd", "ci cd"),
    ("end-to-end", "end to end"),
    ("real-time", "real time"),
    ("cross-functional", "cross functional"),
    ("cross-platform", "cross platform"),
    ("object-oriented", "object oriented"),
    ("data-driven", "data driven"),
    ("results-driven", "results driven"),
    ("detail-oriented", "detail oriented"),
    ("customer-facing", "customer facing"),
    ("client-facing", "client facing"),
    ("user-facing", "user facing"),
    ("client-side", "client side"),
    ("server-side", "server side"),
    ("cloud-native", "cloud native"),
    ("event-driven", "event driven"),
    ("test-driven", "test driven"),
    ("open-source", "open source"),
    ("hands-on", "hands on"),
    ("large-scale", "large scale"),
    ("high-performance", "high performance"),
    ("high-availability", "high availability"),
    ("fault-tolerant", "fault tolerant"),
    ("mission-critical", "mission critical"),
    ("fast-paced", "fast paced"),
    ("problem-solving", "problem solving"),
    ("decision-making", "decision making"),
    ("self-starter", "self starter"),
    ("self-motivated", "self motivated"),
    ("team-oriented", "team oriented"),
    ("machine-learning", "machine learning"),
    ("deep-learning", "deep learning"),
    ("e-commerce", "e commerce"),
    ("co-founder", "co founder"),
    ("a/b testing", "ab testing"),
    ("micro-services", "microservices"),
    ("web-based", "web based"),
    ("multi-threaded", "multi threaded"),
    ("on-call", "on call"),
)
