"""Instruction templates sent alongside the uploaded audio."""
from typing import Optional, Union

from src.transcription.models import TranscriptionStyle

TRANSCRIPTION_PROMPTS: dict[TranscriptionStyle, str] = {
    TranscriptionStyle.ACCURATE: (
        "You are a professional transcriptionist with expertise in audio processing. "
        "Please transcribe the following audio with maximum accuracy.\n"
        "\n"
        "Requirements:\n"
        "- Transcribe EXACTLY what is spoken, including filler words (um, uh, like)\n"
        "- Use proper punctuation and capitalization\n"
        "- Preserve natural speech patterns and pauses with appropriate punctuation\n"
        '- If multiple speakers, indicate speaker changes with "Speaker 1:", "Speaker 2:", etc.\n'
        "- For unclear words, use [inaudible] or [unclear]\n"
        "- Maintain original grammar and sentence structure as spoken\n"
        "- Include natural hesitations and corrections as they occur\n"
        "\n"
        "Return only the transcription without any additional commentary."
    ),
    TranscriptionStyle.CLEAN: (
        "You are a professional editor transcribing audio for publication. "
        "Please provide a clean, readable transcription.\n"
        "\n"
        "Requirements:\n"
        "- Remove filler words (um, uh, like, you know)\n"
        "- Correct obvious grammatical errors while preserving meaning\n"
        "- Use proper punctuation and paragraph breaks for readability\n"
        "- Capitalize proper nouns and sentence beginnings\n"
        "- For multiple speakers, use clear speaker labels\n"
        "- Convert numbers to written form when appropriate for readability\n"
        "- Ensure smooth, professional flow while maintaining original meaning\n"
        "\n"
        "Return only the clean transcription without any additional commentary."
    ),
    TranscriptionStyle.STRUCTURED: (
        "You are transcribing a professional meeting or interview. "
        "Please provide a well-structured transcription.\n"
        "\n"
        "Requirements:\n"
        "- Clearly identify and label each speaker (Speaker 1, Speaker 2, or use names if mentioned)\n"
        "- Use paragraph breaks for each speaker turn\n"
        "- Include important non-verbal context in brackets [laughter], [pause], [phone rings]\n"
        "- Maintain professional tone and proper formatting\n"
        "- Preserve key points and decisions clearly\n"
        "- Use timestamps if natural breaks occur\n"
        "- Format as a readable dialogue\n"
        "\n"
        "Return only the structured transcription without any additional commentary."
    ),
    TranscriptionStyle.TECHNICAL: (
        "You are transcribing technical or specialized content. "
        "Please provide an accurate technical transcription.\n"
        "\n"
        "Requirements:\n"
        "- Preserve all technical terms, jargon, and specialized vocabulary exactly\n"
        "- Maintain precise numerical data, measurements, and specifications\n"
        "- Keep acronyms and abbreviations as spoken\n"
        "- Use proper formatting for technical discussions\n"
        "- Preserve logical flow and technical explanations\n"
        "- Include speaker identification if multiple people\n"
        "- Maintain precision over readability for technical accuracy\n"
        "\n"
        "Return only the technical transcription without any additional commentary."
    ),
    TranscriptionStyle.CONVERSATIONAL: (
        "You are transcribing casual conversation or creative content. "
        "Please provide a natural, engaging transcription.\n"
        "\n"
        "Requirements:\n"
        "- Capture the natural flow and personality of speakers\n"
        "- Preserve emotional tone and emphasis through punctuation\n"
        "- Include relevant interjections and reactions\n"
        "- Use paragraph breaks for natural conversation flow\n"
        "- Maintain the casual, authentic feel of the dialogue\n"
        "- Include context clues for tone [excited], [whispered], [frustrated] when clear\n"
        "- Keep the human, relatable quality of the conversation\n"
        "\n"
        "Return only the conversational transcription without any additional commentary."
    ),
}

LANGUAGE_INSTRUCTION = "IMPORTANT: The audio is in {language}. Please transcribe in the same language."
CONTEXT_INSTRUCTION = "Context: {context}"


def build_prompt(
    style: Union[TranscriptionStyle, str, None],
    language: Optional[str] = None,
    context: Optional[str] = None,
) -> str:
    sections = [TRANSCRIPTION_PROMPTS[TranscriptionStyle.parse(style)]]
    if language and language.strip():
        sections.append(LANGUAGE_INSTRUCTION.format(language=language.strip()))
    if context and context.strip():
        sections.append(CONTEXT_INSTRUCTION.format(context=context.strip()))
    return "\n\n".join(sections)
