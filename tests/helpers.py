from flappy.session import Session

FRAME = 1.0 / 60


class MidGapRng:
    """Always places the gap in the middle of the allowed range."""

    def uniform(self, low: float, high: float) -> float:
        return (low + high) / 2


def run_frames(session: Session, seconds: float, autopilot: bool = False, ceiling: float = 340.0):
    """Ticks at 60 FPS. With autopilot the bird flaps whenever it sinks below `ceiling`."""
    scores = []
    for _ in range(round(seconds / FRAME)):
        if autopilot and session.actor.y > ceiling and session.actor.velocity > 0:
            session.on_flap_input()
        session.tick(FRAME)
        scores.append(session.score)
    return scores
