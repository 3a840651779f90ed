"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

ICON_SIZE = 64


def create_icon_image(days: int) -> Image.Image:
    """Return a 64×64 RGBA image showing days until the next Patch Tuesday.

    White digits on accent blue; on Patch Tuesday itself the icon turns
    green and shows 0.
    """
    size = ICON_SIZE
    bg = "#107C10" if days == 0 else "#0078D4"
    img = Image.new("RGBA", (size, size), bg)
    draw = ImageDraw.Draw(img)
    text = str(days)

    # Find the largest font size that fits the icon
    font_size = 120
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("segoeuib.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        tw = bbox[2] - bbox[0]
        th = bbox[3] - bbox[1]
        if tw <= size and th <= size:
            break
        font_size -= 1

    # Centre the actual visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (size - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="white", font=font)

    return img
