"""Instruction fragments for the call-to-action rewrite prompt."""

EXPLANATION_MARKER = "Explanation:"

BASE_INSTRUCTION = (
    "You are a helpful assistant. When the user provides text, rephrase it to remove any "
    "instances of 'click here' or 'tap here' and replace them with a specific, engaging "
    "call to action. For each suggestion, clearly identify the core call to action "
    "(e.g., 'download now', 'learn more', 'get started') and enclose *only that specific "
    "phrase* within square brackets. The rest of the suggestion text should not be in "
    "brackets. Capitalize the bracketed phrase only when it begins the sentence; otherwise "
    "keep it lowercase. Never use the words 'click' or 'here' inside the brackets. For "
    "example: 'Discover our new features and [explore more].' or '[Download the guide] to "
    "get started.' Do not include any accompanying URL or additional markdown link "
    "formatting."
)

KEEP_WORDS_HARD = (
    "ABSOLUTE REQUIREMENT: every suggestion must contain the following words or phrases "
    "exactly as written: {keep_words}."
)

NO_EM_DASH = (
    "Never use the em dash character (—) anywhere in your reply; use commas or "
    "periods instead."
)

EXPLANATION_INSTRUCTION = (
    "After the suggestions, on a new line, add a short explanation of no more than 3 "
    "sentences describing why they work, starting with '" + EXPLANATION_MARKER + "'."
)

NUM_SUGGESTIONS = (
    "Provide exactly {count} distinct suggestions, each on a new line and prefixed with a "
    "number followed by a period (e.g., '1. '). Do not include any introductory or "
    "concluding text, just the numbered list{explanation_clause}."
)
NUM_SUGGESTIONS_EXPLANATION_CLAUSE = " followed by the requested explanation"

TONE_ADJUST = "Adjust the tone: more {pole}."
TONE_BALANCED = "Keep the tone balanced between {first} and {second}."

# (attribute, negative pole, positive pole), in prompt order
TONE_AXES = (
    ("playful_professional", "playful", "professional"),
    ("casual_formal", "casual", "formal"),
    ("friendly_authoritative", "friendly", "authoritative"),
)

LENGTH_SHORT = "Adjust the length: short and punchy."
LENGTH_LONG = "Adjust the length: long and descriptive."

COMPANY_TYPE = "The company is a {value}."
WHAT_COMPANY_DOES = "What the company does: {value}."
TARGET_AUDIENCE = "The target audience is: {value}."

BAN_WORDS = "Never use any of the following words or phrases: {ban_words}."
KEEP_WORDS_SOFT = "Ensure the suggestions include the following words or phrases: {keep_words}."

# Role labels used when a provider takes a single combined message
SYSTEM_LABEL = "System instruction:"
USER_LABEL = "User message:"
