"""Prompt and reply templates for the chat assistant."""

SYSTEM_PROMPT_TEMPLATE = """You are a helpful AI assistant with access to internet search results and PDF document analysis.

When answering questions:
1. If internet search results are provided, use them to give accurate, current information
2. If PDF content is available, reference it when relevant
3. Be concise but informative
4. Cite sources when using search results

{search_section}
{document_section}"""

SEARCH_SECTION_TEMPLATE = "\n\nInternet Search Results:\n{search_block}"

DOCUMENT_BLOCK_HEADER = "\n\nPDF Content Available:\n"
DOCUMENT_SEPARATOR = "\n\n---\n\n"

# Fallback reply pieces, emitted in this order
FALLBACK_SEARCH_INTRO = "Based on the internet search results:\n\n{excerpt}\n\n"
FALLBACK_DOCUMENT_ACK = "I also have access to the uploaded PDF document(s). "
FALLBACK_ECHO = 'I received your message: "{query}"\n\n'
CREDENTIALS_NOTICE = (
    "I'm here to help! Note: For full AI capabilities, configure the "
    "GOOGLE_API_KEY environment variable.\n\n"
)
FALLBACK_SEARCH_FOLLOWUP = (
    "I found relevant information from Wikipedia that should help answer your question. "
)
FALLBACK_CLOSING = "Feel free to ask follow-up questions or upload PDF documents for analysis!"

NO_RESPONSE_GENERATED = "No response generated."

SEARCH_NO_RESULTS = "No relevant results found."
SEARCH_UNAVAILABLE = "Unable to search the internet at this time."
