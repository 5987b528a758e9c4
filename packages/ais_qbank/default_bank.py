from typing import Dict, List
from .domain import Question, QuestionCategory as C, Difficulty as D, InterviewRole as R

DEFAULT_QUESTIONS: Dict[R, List[Question]] = {
    R.FRONTEND: [
        Question(
            id="fe-1",
            category=C.BEHAVIORAL,
            prompt="Tell me about a time when you had to optimize a slow-loading web application. What was your approach?",
            difficulty=D.MEDIUM,
            hints=("Consider metrics", "User impact", "Technical solutions"),
            expected_keywords=("performance", "optimization", "loading", "metrics", "user experience"),
            follow_up="What tools did you use to identify the bottlenecks?",
        ),
        Question(
            id="fe-2",
            category=C.TECHNICAL,
            prompt="Explain the difference between controlled and uncontrolled components in React.",
            difficulty=D.MEDIUM,
            hints=("State management", "Form handling", "React patterns"),
            expected_keywords=("state", "props", "ref", "controlled", "uncontrolled"),
            follow_up="When would you choose one over the other?",
        ),
        Question(
            id="fe-3",
            category=C.CODING,
            prompt="Write a function to debounce user input in a search box. Explain why debouncing is important.",
            difficulty=D.EASY,
            hints=("setTimeout", "clearTimeout", "Performance"),
            expected_keywords=("debounce", "setTimeout", "performance", "API calls"),
            follow_up="How would you test this function?",
        ),
        Question(
            id="fe-4",
            category=C.TECHNICAL,
            prompt="How would you implement server-side rendering in a React application? What are the benefits?",
            difficulty=D.HARD,
            hints=("SEO", "Initial load", "Hydration"),
            expected_keywords=("SSR", "SEO", "performance", "hydration", "Next.js"),
            follow_up="What challenges might you face with SSR?",
        ),
    ],
    R.BACKEND: [
        Question(
            id="be-1",
            category=C.BEHAVIORAL,
            prompt="Describe a situation where you had to design a scalable API. What considerations did you make?",
            difficulty=D.HARD,
            hints=("Load balancing", "Caching", "Database design"),
            expected_keywords=("scalability", "API", "load", "caching", "database"),
            follow_up="How did you handle authentication?",
        ),
        Question(
            id="be-2",
            category=C.TECHNICAL,
            prompt="Explain the CAP theorem and how it applies to distributed systems.",
            difficulty=D.HARD,
            hints=("Consistency", "Availability", "Partition tolerance"),
            expected_keywords=("CAP", "consistency", "availability", "partition", "distributed"),
            follow_up="Can you give a real-world example?",
        ),
        Question(
            id="be-3",
            category=C.SYSTEM_DESIGN,
            prompt="Design a URL shortening service like bit.ly. What are the key components?",
            difficulty=D.HARD,
            hints=("Hashing", "Database", "Scalability"),
            expected_keywords=("hash", "database", "redirect", "scalability", "collision"),
            follow_up="How would you handle collision resolution?",
        ),
        Question(
            id="be-4",
            category=C.TECHNICAL,
            prompt="What is the difference between SQL and NoSQL databases? When would you use each?",
            difficulty=D.MEDIUM,
            hints=("Structure", "Scalability", "Use cases"),
            expected_keywords=("SQL", "NoSQL", "relational", "document", "scalability"),
            follow_up="What about consistency guarantees?",
        ),
    ],
    R.FULLSTACK: [
        Question(
            id="fs-1",
            category=C.BEHAVIORAL,
            prompt="Tell me about a full-stack project you built from scratch. What was the most challenging part?",
            difficulty=D.MEDIUM,
            hints=("Architecture", "Frontend-backend integration", "Deployment"),
            expected_keywords=("full-stack", "frontend", "backend", "integration", "deployment"),
            follow_up="How did you handle state management across the stack?",
        ),
        Question(
            id="fs-2",
            category=C.TECHNICAL,
            prompt="How would you implement real-time notifications in a web application?",
            difficulty=D.HARD,
            hints=("WebSockets", "Polling", "Server-sent events"),
            expected_keywords=("WebSocket", "real-time", "notifications", "socket.io", "SSE"),
            follow_up="What about mobile push notifications?",
        ),
        Question(
            id="fs-3",
            category=C.SYSTEM_DESIGN,
            prompt="Design a social media feed with infinite scroll. Consider both frontend and backend.",
            difficulty=D.HARD,
            hints=("Pagination", "Caching", "Performance"),
            expected_keywords=("pagination", "infinite scroll", "caching", "performance", "API"),
            follow_up="How would you handle new posts appearing in real-time?",
        ),
        Question(
            id="fs-4",
            category=C.TECHNICAL,
            prompt="Explain JWT authentication and its advantages over session-based auth.",
            difficulty=D.MEDIUM,
            hints=("Stateless", "Token", "Security"),
            expected_keywords=("JWT", "token", "stateless", "authentication", "security"),
            follow_up="Where would you store the JWT on the client?",
        ),
    ],
    R.DATA: [
        Question(
            id="de-1",
            category=C.BEHAVIORAL,
            prompt="Describe a time when you had to work with messy, unstructured data. How did you clean and process it?",
            difficulty=D.MEDIUM,
            hints=("Data quality", "ETL", "Tools"),
            expected_keywords=("data cleaning", "ETL", "pipeline", "quality", "transformation"),
            follow_up="What tools did you use for this task?",
        ),
        Question(
            id="de-2",
            category=C.TECHNICAL,
            prompt="Explain the difference between a data warehouse and a data lake.",
            difficulty=D.MEDIUM,
            hints=("Structure", "Storage", "Use cases"),
            expected_keywords=("warehouse", "lake", "structured", "unstructured", "schema"),
            follow_up="When would you choose one over the other?",
        ),
        Question(
            id="de-3",
            category=C.CODING,
            prompt="Write a SQL query to find the top 5 customers by total purchase amount in the last year.",
            difficulty=D.EASY,
            hints=("JOIN", "GROUP BY", "ORDER BY"),
            expected_keywords=("SELECT", "JOIN", "GROUP BY", "ORDER BY", "LIMIT"),
            follow_up="How would you optimize this query for a large dataset?",
        ),
        Question(
            id="de-4",
            category=C.TECHNICAL,
            prompt="How would you design a real-time data pipeline for streaming analytics?",
            difficulty=D.HARD,
            hints=("Kafka", "Spark", "Stream processing"),
            expected_keywords=("streaming", "Kafka", "pipeline", "real-time", "processing"),
            follow_up="What about fault tolerance and data recovery?",
        ),
    ],
    R.ML: [
        Question(
            id="ml-1",
            category=C.BEHAVIORAL,
            prompt="Tell me about a machine learning model you deployed to production. What challenges did you face?",
            difficulty=D.HARD,
            hints=("Deployment", "Monitoring", "Performance"),
            expected_keywords=("model", "deployment", "production", "monitoring", "MLOps"),
            follow_up="How did you handle model drift?",
        ),
        Question(
            id="ml-2",
            category=C.TECHNICAL,
            prompt="Explain the bias-variance tradeoff and how it relates to overfitting.",
            difficulty=D.MEDIUM,
            hints=("Model complexity", "Generalization", "Training vs test"),
            expected_keywords=("bias", "variance", "overfitting", "underfitting", "generalization"),
            follow_up="How would you detect overfitting in your model?",
        ),
        Question(
            id="ml-3",
            category=C.TECHNICAL,
            prompt="What is the difference between supervised and unsupervised learning? Give examples.",
            difficulty=D.EASY,
            hints=("Labels", "Training data", "Use cases"),
            expected_keywords=("supervised", "unsupervised", "labels", "classification", "clustering"),
            follow_up="What about semi-supervised learning?",
        ),
        Question(
            id="ml-4",
            category=C.SYSTEM_DESIGN,
            prompt="Design a recommendation system for an e-commerce platform. What algorithms would you use?",
            difficulty=D.HARD,
            hints=("Collaborative filtering", "Content-based", "Hybrid"),
            expected_keywords=("recommendation", "collaborative", "filtering", "matrix", "similarity"),
            follow_up="How would you handle the cold start problem?",
        ),
    ],
}
