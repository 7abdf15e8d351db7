import re
import numpy as np

from logics import config


_NOTE_PATTERN = re.compile(r'^([A-Ga-g])([#b]?)(-?\d+)$')
_SEMITONES = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}


def note_to_frequency(note):
    """
    Convert scientific pitch notation to Hz (A4 = 440 Hz).

    Examples:
        note_to_frequency('A4') -> 440.0
        note_to_frequency('C5') -> 523.25...
        note_to_frequency('F#3') -> 184.99...
    """
    m = _NOTE_PATTERN.match(note.strip())
    if not m:
        raise ValueError(f"Invalid note name: {note!r}")
    letter, accidental, octave = m.groups()
    semitone = _SEMITONES[letter.upper()]
    if accidental == '#':
        semitone += 1
    elif accidental == 'b':
        semitone -= 1
    midi = (int(octave) + 1) * 12 + semitone
    return 440.0 * 2 ** ((midi - 69) / 12)


def envelope(t, attack=config.ENV_ATTACK, decay=config.ENV_DECAY,
             sustain=config.ENV_SUSTAIN, release=config.ENV_RELEASE, gate=config.GATE_TIME):
    """
    ADSR amplitude envelope sampled at times t (seconds).

    Linear attack to 1, linear decay to the sustain level, held until the gate
    closes, then a linear release to silence from whatever level was reached.
    """
    on_times = [0.0, attack, attack + decay]
    on_levels = [0.0, 1.0, sustain]
    level_at_gate = np.interp(gate, on_times, on_levels)

    held = np.interp(t, on_times, on_levels)
    released = level_at_gate * np.clip(1.0 - (t - gate) / release, 0.0, 1.0)
    return np.where(t < gate, held, released)


def pitch_curve(frequency, t, glide_semitones=config.GLIDE_SEMITONES, glide_time=config.GLIDE_TIME):
    """Exponential ramp from frequency up by glide_semitones, then held at the target pitch."""
    target = frequency * 2 ** (glide_semitones / 12)
    if glide_time <= 0:
        return np.full_like(t, target, dtype=float)
    progress = np.clip(t / glide_time, 0.0, 1.0)
    return frequency * (target / frequency) ** progress


def render_tone(frequency, sample_rate=config.SAMPLE_RATE, volume=config.VOLUME,
                glide_semitones=config.GLIDE_SEMITONES, glide_time=config.GLIDE_TIME):
    """
    Render one key-press tone: a sawtooth that glides up by glide_semitones
    over glide_time, shaped by the ADSR envelope.

    Returns a float32 mono buffer suitable for sounddevice.play().
    """
    duration = config.GATE_TIME + config.ENV_RELEASE
    t = np.arange(int(sample_rate * duration)) / sample_rate

    freq = pitch_curve(frequency, t, glide_semitones, glide_time)

    # Integrate frequency to phase so the glide has no discontinuities
    cycles = np.cumsum(freq) / sample_rate
    saw = 2.0 * (cycles - np.floor(cycles)) - 1.0

    return (saw * envelope(t) * volume).astype(np.float32)


class Synthesizer:
    """
    Monophonic key-press synthesizer.

    Tones are rendered once per note and cached. Playback goes through
    sounddevice, loaded on first use; if PortAudio or the output device is
    unavailable the synthesizer reports it once and stays silent afterwards.

    Args:
        sample_rate: Output sample rate in Hz.
        backend: Object with play(buffer, samplerate=..., blocking=...), normally
                 the sounddevice module. Loaded lazily when None.
        muted: Start muted.
    """

    def __init__(self, sample_rate=config.SAMPLE_RATE, backend=None, muted=False):
        self.sample_rate = sample_rate
        self.muted = muted
        self._backend = backend
        self._available = True
        self._cache = {}

    @property
    def available(self) -> bool:
        return self._available

    def render(self, note):
        if note not in self._cache:
            self._cache[note] = render_tone(note_to_frequency(note), sample_rate=self.sample_rate)
        return self._cache[note]

    def play_category(self, category):
        """Play the tone assigned to an input category ('digit', 'operator', ...)."""
        note = config.CATEGORY_NOTES.get(category)
        if note is not None:
            self.play(note)

    def play(self, note):
        if self.muted or not self._available:
            return
        buffer = self.render(note)

        try:
            backend = self._load_backend()
        except OSError as e:
            self._disable(f"PortAudio not available: {e}")
            return

        port_audio_error = getattr(backend, 'PortAudioError', OSError)
        try:
            backend.play(buffer, samplerate=self.sample_rate, blocking=False)
        except (OSError, port_audio_error) as e:
            self._disable(f"Playback failed: {e}")

    def _load_backend(self):
        if self._backend is None:
            # Importing sounddevice loads the PortAudio shared library
            import sounddevice
            self._backend = sounddevice
        return self._backend

    def _disable(self, reason):
        print(f"[AUDIO] {reason}. Sound feedback disabled.")
        self._available = False
