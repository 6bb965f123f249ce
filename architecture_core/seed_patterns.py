"""
Seed data for the architecture pattern catalog.

Records are stored in the same camelCase document shape the catalog persists,
and are validated when they are loaded into a catalog.
"""

from typing import Any, Dict, List

SEED_PATTERNS: List[Dict[str, Any]] = [
    {
        "id": "monolithic",
        "name": "Monolithic Architecture",
        "category": "monolithic",
        "description": "A single, unified application where all components are tightly coupled and deployed together.",
        "pros": [
            "Simple to develop and deploy",
            "Easier debugging and testing",
            "Lower initial development cost",
            "Simpler database transactions",
            "Faster development for small teams",
        ],
        "cons": [
            "Difficult to scale individual components",
            "Technology lock-in",
            "Slower deployment cycles",
            "Harder to maintain as application grows",
            "Single point of failure",
        ],
        "useCases": [
            "Small to medium applications",
            "MVP development",
            "Simple business logic",
            "Small development teams",
            "Rapid prototyping",
        ],
        "characteristics": {
            "complexity": "low",
            "scalability": "low",
            "maintainability": "medium",
            "performance": "medium",
            "cost": "low",
            "teamSize": "small",
            "timeToMarket": "fast",
            "security": "medium",
        },
        "technologyStack": ["Spring Boot", "Django", "Rails", "Express.js"],
        "deployment": ["Single deployment unit", "Traditional hosting"],
        "monitoring": ["Application logs", "Basic metrics"],
        "security": ["Standard authentication", "Database security"],
        "examples": [
            {
                "company": "Basecamp",
                "description": "Uses monolithic Rails architecture",
                "link": "https://basecamp.com",
            }
        ],
        "bestPractices": [
            "Keep modules loosely coupled",
            "Use dependency injection",
            "Implement proper logging",
            "Plan for future modularization",
        ],
        "antiPatterns": [
            "God objects",
            "Tight coupling",
            "Monolithic database",
            "No separation of concerns",
        ],
    },
    {
        "id": "microservices",
        "name": "Microservices Architecture",
        "category": "microservices",
        "description": "A collection of small, independent services that communicate through well-defined APIs.",
        "pros": [
            "Independent deployment and scaling",
            "Technology diversity",
            "Fault isolation",
            "Team autonomy",
            "Easier to maintain and update",
        ],
        "cons": [
            "Increased complexity",
            "Distributed system challenges",
            "Higher operational overhead",
            "Data consistency issues",
            "Network latency",
        ],
        "useCases": [
            "Large, complex applications",
            "High scalability requirements",
            "Multiple development teams",
            "Different technology needs",
            "Independent service evolution",
        ],
        "characteristics": {
            "complexity": "high",
            "scalability": "high",
            "maintainability": "high",
            "performance": "high",
            "cost": "high",
            "teamSize": "large",
            "timeToMarket": "slow",
            "security": "high",
        },
        "technologyStack": ["Docker", "Kubernetes", "API Gateway", "Service Mesh"],
        "deployment": ["Container orchestration", "CI/CD pipelines"],
        "monitoring": ["Distributed tracing", "Service metrics"],
        "security": ["Service-to-service auth", "API security"],
        "examples": [
            {
                "company": "Netflix",
                "description": "Pioneered microservices at scale",
                "link": "https://netflix.com",
            }
        ],
        "bestPractices": [
            "Design for failure",
            "Use API gateways",
            "Implement circuit breakers",
            "Monitor everything",
        ],
        "antiPatterns": [
            "Distributed monolith",
            "Shared databases",
            "Tight coupling between services",
            "Inconsistent APIs",
        ],
    },
    {
        "id": "serverless",
        "name": "Serverless Architecture",
        "category": "serverless",
        "description": "Event-triggered functions run on managed infrastructure that scales automatically and bills per use.",
        "pros": [
            "No server management",
            "Automatic scaling",
            "Pay-per-use pricing",
            "Fast iteration on small units of code",
        ],
        "cons": [
            "Cold start latency",
            "Vendor lock-in",
            "Harder local debugging",
            "Execution time limits",
        ],
        "useCases": [
            "Variable or spiky workloads",
            "Event processing",
            "Cost-sensitive projects",
            "Scheduled jobs and glue code",
        ],
        "characteristics": {
            "complexity": "medium",
            "scalability": "high",
            "maintainability": "medium",
            "performance": "medium",
            "cost": "low",
            "teamSize": "small",
            "timeToMarket": "fast",
            "security": "medium",
        },
        "technologyStack": ["AWS Lambda", "Azure Functions", "Google Cloud Functions", "API Gateway"],
        "deployment": ["Function-as-a-Service platforms", "Infrastructure as code"],
        "monitoring": ["Per-invocation metrics", "Cloud provider tracing"],
        "security": ["Least-privilege function roles", "Managed identity"],
        "examples": [
            {
                "company": "Coca-Cola",
                "description": "Runs vending machine payments on serverless functions",
                "link": "https://aws.amazon.com/solutions/case-studies/coca-cola/",
            }
        ],
        "bestPractices": [
            "Keep functions small and single-purpose",
            "Keep functions stateless",
            "Set concurrency and timeout limits",
        ],
        "antiPatterns": [
            "Long-running functions",
            "Function chains calling each other synchronously",
            "Shared mutable state between invocations",
        ],
    },
    {
        "id": "event-driven",
        "name": "Event-Driven Architecture",
        "category": "event-driven",
        "description": "Components communicate by producing and consuming events through a broker, decoupling senders from receivers.",
        "pros": [
            "Loose coupling between producers and consumers",
            "Natural fit for real-time processing",
            "Easy to add new consumers",
            "High throughput",
        ],
        "cons": [
            "Eventual consistency",
            "Harder to trace end-to-end flows",
            "Event schema evolution",
            "Broker becomes critical infrastructure",
        ],
        "useCases": [
            "Real-time analytics",
            "IoT data ingestion",
            "Workflow orchestration",
            "Integrating many independent systems",
        ],
        "characteristics": {
            "complexity": "high",
            "scalability": "high",
            "maintainability": "medium",
            "performance": "high",
            "cost": "medium",
            "teamSize": "medium",
            "timeToMarket": "medium",
            "security": "medium",
        },
        "technologyStack": ["Apache Kafka", "RabbitMQ", "Amazon EventBridge", "NATS"],
        "deployment": ["Managed message brokers", "Containerised consumers"],
        "monitoring": ["Consumer lag", "Dead-letter queues", "Event tracing"],
        "security": ["Topic-level access control", "Encrypted transport"],
        "examples": [
            {
                "company": "LinkedIn",
                "description": "Built Kafka to move activity events between systems",
                "link": "https://www.linkedin.com",
            }
        ],
        "bestPractices": [
            "Version event schemas",
            "Make consumers idempotent",
            "Use dead-letter queues",
        ],
        "antiPatterns": [
            "Events used as remote procedure calls",
            "Giant catch-all events",
            "Hidden ordering assumptions",
        ],
    },
    {
        "id": "layered",
        "name": "Layered Architecture",
        "category": "layered",
        "description": "The application is organised into horizontal layers such as presentation, business and data access, each depending only on the layer below.",
        "pros": [
            "Well understood by most developers",
            "Clear separation of concerns",
            "Easy to test layers in isolation",
        ],
        "cons": [
            "Changes often ripple through every layer",
            "Can become a sinkhole of pass-through code",
            "Scales as a single unit",
        ],
        "useCases": [
            "Line-of-business applications",
            "Teams new to architecture patterns",
            "Applications with stable requirements",
        ],
        "characteristics": {
            "complexity": "low",
            "scalability": "medium",
            "maintainability": "medium",
            "performance": "medium",
            "cost": "low",
            "teamSize": "medium",
            "timeToMarket": "fast",
            "security": "medium",
        },
        "technologyStack": ["ASP.NET", "Spring MVC", "Django", "Laravel"],
        "deployment": ["Single deployment unit", "Application servers"],
        "monitoring": ["Application logs", "Request metrics"],
        "security": ["Centralised authentication layer", "Input validation at the boundary"],
        "examples": [
            {
                "company": "Enterprise CRM vendors",
                "description": "Classic n-tier line-of-business systems",
            }
        ],
        "bestPractices": [
            "Keep layers closed",
            "Keep business rules out of the presentation layer",
            "Define interfaces between layers",
        ],
        "antiPatterns": [
            "Architecture sinkhole",
            "Skipping layers",
            "Anemic domain model",
        ],
    },
    {
        "id": "hexagonal",
        "name": "Hexagonal Architecture",
        "category": "hexagonal",
        "description": "Ports and adapters isolate the domain core from frameworks, databases and delivery mechanisms.",
        "pros": [
            "Domain logic independent of infrastructure",
            "Highly testable",
            "Adapters can be swapped without touching the core",
        ],
        "cons": [
            "More indirection and boilerplate",
            "Steeper learning curve",
            "Overhead for simple CRUD applications",
        ],
        "useCases": [
            "Complex domain logic",
            "Long-lived systems",
            "Applications with many integrations",
        ],
        "characteristics": {
            "complexity": "medium",
            "scalability": "medium",
            "maintainability": "high",
            "performance": "medium",
            "cost": "medium",
            "teamSize": "medium",
            "timeToMarket": "medium",
            "security": "high",
        },
        "technologyStack": ["Spring Boot", "NestJS", "FastAPI", "Go"],
        "deployment": ["Single service or microservice", "Containers"],
        "monitoring": ["Adapter-level metrics", "Structured logs"],
        "security": ["Security enforced in inbound adapters", "Domain invariants validated in the core"],
        "examples": [
            {
                "company": "Netflix",
                "description": "Used hexagonal architecture to swap data sources in studio applications",
                "link": "https://netflixtechblog.com",
            }
        ],
        "bestPractices": [
            "Define ports in domain terms",
            "Keep adapters thin",
            "Test the core without infrastructure",
        ],
        "antiPatterns": [
            "Leaking framework types into the domain",
            "Ports shaped like database tables",
        ],
    },
]
