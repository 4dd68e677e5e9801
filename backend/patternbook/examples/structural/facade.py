# backend/patternbook/examples/structural/facade.py
"""
Facade - Home theater

Q: Watching a movie means dimming lights, lowering the screen, powering the
projector and amplifier and starting the player, in the right order. How do
you give clients one simple entry point to that subsystem?
"""

from typing import List


class Amplifier:
    def on(self) -> str:
        return _say("Amplifier on")

    def set_volume(self, level: int) -> str:
        return _say(f"Amplifier volume set to {level}")

    def off(self) -> str:
        return _say("Amplifier off")


class Projector:
    def on(self) -> str:
        return _say("Projector on")

    def wide_screen_mode(self) -> str:
        return _say("Projector in widescreen mode (16:9)")

    def off(self) -> str:
        return _say("Projector off")


class TheaterLights:
    def dim(self, level: int) -> str:
        return _say(f"Lights dimmed to {level}%")

    def on(self) -> str:
        return _say("Lights on")


class StreamingPlayer:
    def on(self) -> str:
        return _say("Streaming player on")

    def play(self, title: str) -> str:
        return _say(f'Playing "{title}"')

    def stop(self) -> str:
        return _say("Streaming player stopped")

    def off(self) -> str:
        return _say("Streaming player off")


def _say(message: str) -> str:
    print(message)
    return message


class HomeTheaterFacade:
    def __init__(
        self,
        amp: Amplifier,
        projector: Projector,
        lights: TheaterLights,
        player: StreamingPlayer,
    ):
        self.amp = amp
        self.projector = projector
        self.lights = lights
        self.player = player

    def watch_movie(self, title: str) -> List[str]:
        print("Get ready to watch a movie...")
        return [
            self.lights.dim(10),
            self.projector.on(),
            self.projector.wide_screen_mode(),
            self.amp.on(),
            self.amp.set_volume(5),
            self.player.on(),
            self.player.play(title),
        ]

    def end_movie(self) -> List[str]:
        print("Shutting movie theater down...")
        return [
            self.player.stop(),
            self.player.off(),
            self.amp.off(),
            self.projector.off(),
            self.lights.on(),
        ]


def demo() -> dict:
    theater = HomeTheaterFacade(Amplifier(), Projector(), TheaterLights(), StreamingPlayer())
    started = theater.watch_movie("Raiders of the Lost Ark")
    ended = theater.end_movie()
    return {"start_steps": len(started), "end_steps": len(ended)}
