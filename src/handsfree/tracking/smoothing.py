from typing import Optional, Tuple


class PositionSmoother:
    def __init__(self, alpha: float = 0.5):
        """
        Initialize the position smoother.

        Args:
            alpha: Weight of each new sample. 1.0 disables smoothing,
                values near 0 make the cursor sluggish but steady.
        """
        self.alpha = alpha
        self.x_prev: Optional[float] = None
        self.y_prev: Optional[float] = None

    @property
    def position(self) -> Optional[Tuple[float, float]]:
        """Last smoothed position, or None before the first sample."""
        if self.x_prev is None:
            return None
        return (self.x_prev, self.y_prev)

    def update(self, x: float, y: float) -> Tuple[float, float]:
        """
        Filter one raw sample.

        Args:
            x: Raw normalized x
            y: Raw normalized y

        Returns:
            Smoothed (x, y)
        """
        # First sample snaps so the cursor does not glide in from the origin
        if self.x_prev is None:
            self.x_prev = float(x)
            self.y_prev = float(y)
            return (self.x_prev, self.y_prev)

        self.x_prev += (x - self.x_prev) * self.alpha
        self.y_prev += (y - self.y_prev) * self.alpha
        return (self.x_prev, self.y_prev)

    def reset(self) -> None:
        self.x_prev = None
        self.y_prev = None
