from models import GenerationRequest

BASE_INSTRUCTION = (
    "Generate a professional email reply to the message below. "
    "Do not include a subject line. "
)
ORIGINAL_LABEL = "\nOriginal email: \n"

def build_prompt(request: GenerationRequest) -> str:
    prompt = BASE_INSTRUCTION
    if request.tone:
        prompt += f"Use a {request.tone} tone."
    # email content goes last and untouched
    return prompt + ORIGINAL_LABEL + request.email_content
