"""
Prompt texts sent to the image models.

The wording is the contract with the model: edit these strings, never
rebuild them on the fly.
"""
from typing import Dict

ANALYSIS_PROMPT = (
    "Analyze this image in extreme detail. Describe its artistic style (e.g., oil painting, "
    "photorealistic, anime, watercolor), color palette, lighting (e.g., soft, dramatic, golden hour), "
    "composition, subject matter, background, and any notable textures or brushstrokes. Create a "
    "detailed, descriptive paragraph that can be used as part of a larger prompt to replicate this "
    "style. Be very thorough, specific, and evocative."
)

STYLE_PROMPT_TEMPLATE = """You are an expert digital artist. Your task is to take the person from the provided image and place them in a new scene that perfectly matches the following detailed artistic style description:

**Style Description:**
"{style_description}"

**Instructions:**
1. **Recreate the person** from the image provided.
2. **Preserve Identity:** It is absolutely critical that you preserve the person's exact facial features, hair, and overall identity. Do not change them. The likeness must be 100% accurate.
3. **Apply the Style:** Render the person and a new, fitting background using the detailed artistic style described above.
4. **Seamless Integration:** The person must be seamlessly and naturally integrated into the new environment. Pay close attention to lighting and shadows."""

# Restoration presets: key -> (label sent to the model, description shown to users)
RESTORATION_EFFECTS: Dict[str, Dict[str, str]] = {
    "remove_scratches_noise": {
        "label": "Remove scratches and noise",
        "description": "Removes dust, scratches and film grain from old photos.",
    },
    "repair_tears_damage": {
        "label": "Repair tears and damaged areas",
        "description": "Intelligently rebuilds missing or torn parts of the photo.",
    },
    "colorize": {
        "label": "Colorize black and white photo",
        "description": "Adds realistic color to monochrome photos.",
    },
    "enhance_detail_lighting": {
        "label": "Enhance detail and lighting",
        "description": "Improves focus, lighting and contrast for a clearer photo.",
    },
}

RESTORATION_PREFIX = "Please edit the provided image. "
RESTORATION_EFFECTS_TEMPLATE = "Apply these restoration effects: {effects}. "
RESTORATION_INSTRUCTION_TEMPLATE = 'Additionally, follow this specific instruction: "{instruction}".'
