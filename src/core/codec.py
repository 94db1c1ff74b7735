"""WebP conversion of downloaded images."""

from io import BytesIO

from aws_lambda_powertools import Logger
from PIL import Image, UnidentifiedImageError

from core.models.errors import CodecError
from core.utils.constants import WEBP_QUALITY

logger = Logger(UTC=True)

# Modes WebP can encode directly; anything else is converted first.
_WEBP_MODES = frozenset({"RGB", "RGBA"})


class WebPCodec:
    """Converts arbitrary Pillow-readable images to WebP."""

    def __init__(self, quality: int = WEBP_QUALITY) -> None:
        self.quality = quality

    def convert(self, data: bytes) -> bytes:
        """Convert image bytes to WebP.

        Animated inputs keep all of their frames.

        Raises:
            CodecError: If the input is empty, corrupt, unsupported, or exceeds
                Pillow's pixel limit
        """
        if not data:
            raise CodecError(message="webp: image data is empty")

        try:
            with Image.open(BytesIO(data)) as image:
                animated = getattr(image, "is_animated", False)
                if not animated and image.mode not in _WEBP_MODES:
                    has_alpha = "A" in image.getbands() or "transparency" in image.info
                    image = image.convert("RGBA" if has_alpha else "RGB")

                out = BytesIO()
                image.save(
                    out,
                    format="WEBP",
                    quality=self.quality,
                    save_all=animated,
                )
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            EOFError,
            OSError,
            ValueError,
        ) as exc:
            logger.warning(
                "Image conversion failed",
                extra={"error": str(exc), "size": len(data)},
            )
            raise CodecError(
                message=f"webp: {exc}",
                details={"size": len(data)},
            ) from exc

        converted = out.getvalue()
        logger.info(
            "File converted!",
            extra={"input_size": len(data), "output_size": len(converted)},
        )
        return converted
