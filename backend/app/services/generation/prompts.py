"""
Generation Prompts

System and user prompts for generating educational content.

One system prompt exists per output type; any output type without a
dedicated prompt gets the generic one. The quiz prompt asks for the
"Question N:" / "A)" / "Answer:" layout that the markdown augmenter wraps
into question and answer containers, and every prompt allows mermaid
diagrams so they render as diagrams.
"""

from typing import Union

from app.enums.content import ContentType, Difficulty, Subject


_DIAGRAM_HINT = """When a diagram genuinely helps (processes, hierarchies, timelines), include it
as a ```mermaid fenced code block."""


# =============================================================================
# System Prompts by Output Type
# =============================================================================

NOTES_PROMPT = """You are an expert educational content creator. Create comprehensive, well-structured study notes on the given topic.
Format the notes with clear headings, subheadings, bullet points, and explanations.
Include key concepts, definitions, and examples where appropriate.
Adjust the complexity based on the difficulty level ({difficulty}).
Make the content engaging and easy to understand for {difficulty} level students.
{diagram_hint}"""

QUIZ_PROMPT = """You are an expert quiz creator. Generate a quiz with 5-10 multiple-choice questions about the given topic.
Format each question exactly as:
**Question N:** [question text]
A) [option]
B) [option]
C) [option]
D) [option]
**Answer:** [letter]
Explanation: [brief explanation]

Number the questions starting at 1 and leave a blank line between questions.
Adjust difficulty based on {difficulty} level.
Make questions thought-provoking and educational."""

SUMMARY_PROMPT = """You are an expert at creating concise, informative summaries.
Create a clear summary of the given topic that captures the essential points.
Use simple language and organize information logically.
Adjust depth based on {difficulty} level.
Make it comprehensive yet concise."""

EXPLANATION_PROMPT = """You are an expert educator who excels at explaining complex concepts simply.
Provide a clear, step-by-step explanation of the given topic.
Use analogies and examples where helpful.
Break down complex ideas into digestible parts.
Adjust complexity based on {difficulty} level.
Make it engaging and easy to follow.
{diagram_hint}"""

FLASHCARDS_PROMPT = """You are an expert at writing study flashcards.
Create 10-15 flashcards covering the most important facts and concepts of the given topic.
Format each card as:
**Front:** [term or question]
**Back:** [definition or answer]

Keep each side short enough to memorize.
Adjust difficulty based on {difficulty} level."""

LESSON_PLAN_PROMPT = """You are an experienced teacher designing a lesson plan.
Create a lesson plan for the given topic with these sections:
learning objectives, required materials, a timed outline of activities,
guided practice, independent practice, and assessment.
Target {difficulty} level students and keep activities realistic for a single class period.
{diagram_hint}"""

GENERIC_PROMPT = """You are an expert educational content creator.
Create high-quality educational content about the given topic.
Adjust complexity based on {difficulty} level.
Make it engaging, accurate, and well-structured."""

SYSTEM_PROMPTS: dict[str, str] = {
    ContentType.NOTES.value: NOTES_PROMPT,
    ContentType.QUIZ.value: QUIZ_PROMPT,
    ContentType.SUMMARY.value: SUMMARY_PROMPT,
    ContentType.EXPLANATION.value: EXPLANATION_PROMPT,
    ContentType.FLASHCARDS.value: FLASHCARDS_PROMPT,
    ContentType.LESSON_PLAN.value: LESSON_PLAN_PROMPT,
}


def _value(item: Union[ContentType, Difficulty, Subject, str]) -> str:
    return item.value if hasattr(item, "value") else str(item)


def build_system_prompt(
    output_type: Union[ContentType, str], difficulty: Union[Difficulty, str]
) -> str:
    """
    Select and fill the system prompt for an output type.

    Args:
        output_type: Requested output type; unknown values use the generic prompt.
        difficulty: Target difficulty level.

    Returns:
        The system prompt text.
    """
    template = SYSTEM_PROMPTS.get(_value(output_type), GENERIC_PROMPT)
    return template.format(difficulty=_value(difficulty), diagram_hint=_DIAGRAM_HINT)


def build_user_prompt(
    topic: str,
    subject: Union[Subject, str],
    difficulty: Union[Difficulty, str],
    output_type: Union[ContentType, str],
) -> str:
    """Describe the requested content: subject, topic, type and level."""
    return (
        f"Subject: {_value(subject)}\nTopic: {topic}\n\n"
        f"Create {_value(output_type)} for this topic at {_value(difficulty)} difficulty level."
    )
