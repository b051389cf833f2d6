from handsfree.tracking.landmarks import HandLandmarks


def make_hand(index_x, index_y, pinch_distance=0.2):
    """Hand with the index tip at (index_x, index_y) and the thumb tip
    pinch_distance to its right. Other landmarks sit at the palm."""
    points = [(0.5, 0.6)] * 21
    points[HandLandmarks.INDEX_TIP] = (index_x, index_y)
    points[HandLandmarks.THUMB_TIP] = (index_x + pinch_distance, index_y)
    return HandLandmarks.from_points(points, handedness="Right", confidence=0.9)
