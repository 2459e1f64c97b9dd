"""FinSavvy: a conversational financial-advice assistant."""
