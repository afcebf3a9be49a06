import logging
import time

from volume_fader import DecibelScale, LinearScale, VolumeFader


class Media:
    """Stand-in for a player object with a volume attribute."""

    def __init__(self, volume=1.0):
        self.volume = volume


def test_fade_out_in():
    print("Test fade out / fade in:")
    media = Media()
    fader = VolumeFader(media, fade_duration=1000)

    fader.fade_out(lambda: print("faded out"))
    for _ in range(6):
        print(f"  volume={media.volume:.4f}")
        time.sleep(0.2)

    fader.fade_in(lambda: print("faded in"))
    time.sleep(1.2)
    print(f"  volume={media.volume:.4f}")


def test_stop_resume():
    print("Test stop / resume")
    media = Media(0.0)
    fader = VolumeFader(media, fade_duration=2000, scale=LinearScale())

    fader.fade_to(1.0)
    time.sleep(0.5)
    fader.stop()
    print(f"  stopped at volume={media.volume:.4f}")
    time.sleep(0.5)
    fader.start()
    print(f"  resumed at volume={media.volume:.4f}")
    time.sleep(1.2)
    print(f"  volume={media.volume:.4f} active={fader.active}")


def test_chained():
    print("Test chained fades")
    media = Media()
    fader = VolumeFader(media, scale=DecibelScale(40)).set_fade_duration(800)
    fader.fade_out(lambda: fader.fade_to(0.5, lambda: print("  settled at half level")))
    time.sleep(2)
    print(f"  volume={media.volume:.4f}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    test_fade_out_in()
    # test_stop_resume()
    # test_chained()
