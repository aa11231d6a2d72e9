"""Sound manager for game audio cues and background ambience."""

import logging
import math
import random
import struct
from pathlib import Path
from typing import Iterable, Optional

import pygame

from .constants import CUE_VOLUMES, SOUND_FILES

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


class SoundManager:
    """Manages game sound effects and the looping ambience track."""

    def __init__(self, assets_dir: Optional[Path] = None, enabled: bool = True):
        """
        Initialize the sound manager.

        Args:
            assets_dir: Directory holding recorded sounds (optional)
            enabled: Start with sound switched on
        """
        self.enabled = enabled
        self.available = True
        self.volume = 1.0
        self.assets_dir = Path(assets_dir) if assets_dir else None
        self.sounds = {}
        self.ambience_channel: Optional[pygame.mixer.Channel] = None
        self.ambience_paused = False

        # Initialize pygame mixer if not already done
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            except pygame.error as e:
                logger.warning("Could not initialize sound mixer: %s", e)
                self.available = False
                return

        self._load_sounds()

    def _load_sounds(self):
        """Load recorded sounds where present, synthesize the rest."""
        generators = {
            'pop': self._create_pop_sound,
            'loss': self._create_loss_sound,
            'win': self._create_win_sound,
            'ambience': self._create_ambience_sound,
        }
        for name, generate in generators.items():
            sound = self._load_file(SOUND_FILES[name])
            if sound is None:
                try:
                    sound = generate()
                except pygame.error as e:
                    logger.warning("Could not generate %s sound: %s", name, e)
                    continue
            self.sounds[name] = sound

        self._apply_volume()

        logger.debug("Loaded sounds: %s", ", ".join(sorted(self.sounds)))

    def _load_file(self, filename: str) -> Optional[pygame.mixer.Sound]:
        """Load a sound file from the assets directory if it exists."""
        if self.assets_dir is None:
            return None
        path = self.assets_dir / filename
        if not path.exists():
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error as e:
            logger.warning("Could not load %s, using generated sound: %s", path, e)
            return None

    def _create_sound_from_samples(self, samples):
        """Normalize mono float samples and wrap them as a 16-bit stereo Sound."""
        peak = max((abs(s) for s in samples), default=0) or 1.0
        scale = 32767 / peak

        # Same value on the left and right channel
        frames = struct.Struct('<hh')
        raw_data = b''.join(frames.pack(int(s * scale), int(s * scale)) for s in samples)
        return pygame.mixer.Sound(buffer=raw_data)

    def _create_pop_sound(self):
        """Create a short balloon pop."""
        duration = 0.12
        num_samples = int(SAMPLE_RATE * duration)

        samples = []
        for i in range(num_samples):
            t = i / SAMPLE_RATE
            # Sharp noise burst with a quick upward chirp
            envelope = math.exp(-t * 40)
            noise = random.uniform(-1, 1)
            chirp = math.sin(2 * math.pi * (600 + 2400 * t) * t)
            samples.append(envelope * (0.6 * noise + 0.4 * chirp))

        return self._create_sound_from_samples(samples)

    def _create_loss_sound(self):
        """Create a sad descending tone for a missed shot."""
        duration = 0.9
        num_samples = int(SAMPLE_RATE * duration)

        # Three falling notes
        notes = [
            (0.0, 0.3, 392),   # G4
            (0.3, 0.3, 370),   # F#4
            (0.6, 0.3, 349),   # F4
        ]

        samples = []
        for i in range(num_samples):
            t = i / SAMPLE_RATE
            sample = 0
            for start, dur, freq in notes:
                if start <= t < start + dur:
                    note_t = t - start
                    envelope = math.exp(-note_t * 4)
                    sample += envelope * (math.sin(2 * math.pi * freq * t) +
                                          0.3 * math.sin(2 * math.pi * freq * 2 * t))
            samples.append(sample)

        return self._create_sound_from_samples(samples)

    def _create_win_sound(self):
        """Create a short victory jingle: two quick G notes, then a rising chord."""
        duration = 1.1
        num_samples = int(SAMPLE_RATE * duration)

        # (start, length, frequencies played together)
        phrase = [
            (0.00, 0.12, (392,)),             # G4
            (0.14, 0.12, (392,)),             # G4
            (0.28, 0.18, (494,)),             # B4
            (0.48, 0.62, (587, 784, 988)),    # D5 + G5 + B5 chord
        ]

        samples = []
        for i in range(num_samples):
            t = i / SAMPLE_RATE
            sample = 0
            for start, length, chord in phrase:
                note_t = t - start
                if not 0 <= note_t < length:
                    continue
                # Linear fade-in over 10ms, then a slow release
                envelope = min(1.0, note_t / 0.01) * (1 - note_t / length) ** 2
                # Light vibrato on the held chord
                wobble = 1 + 0.004 * math.sin(2 * math.pi * 6 * note_t)
                for freq in chord:
                    phase = 2 * math.pi * freq * wobble * t
                    # Triangle-ish tone from odd harmonics
                    sample += envelope * (math.sin(phase) - math.sin(3 * phase) / 9)
            samples.append(sample)

        return self._create_sound_from_samples(samples)

    def _create_ambience_sound(self):
        """Create a two second arcade bass loop."""
        duration = 2.0
        num_samples = int(SAMPLE_RATE * duration)
        bass_line = [110, 110, 165, 147, 110, 110, 196, 165]
        step = duration / len(bass_line)

        samples = []
        for i in range(num_samples):
            t = i / SAMPLE_RATE
            freq = bass_line[int(t / step) % len(bass_line)]
            note_t = t % step
            envelope = math.exp(-note_t * 6)
            # Square-ish wave for a retro feel
            square = 1.0 if math.sin(2 * math.pi * freq * t) >= 0 else -1.0
            samples.append(envelope * 0.5 * square)

        return self._create_sound_from_samples(samples)

    def play(self, sound_name: str):
        """Play a sound effect by name."""
        if not (self.enabled and self.available):
            return

        sound = self.sounds.get(sound_name)
        if sound:
            sound.play()

    def play_cues(self, cues: Iterable[str]):
        """Play each cue reported by a game tick."""
        for cue in cues:
            self.play(cue)

    def start_ambience(self):
        """Start looping the background ambience."""
        if not (self.enabled and self.available):
            return

        sound = self.sounds.get('ambience')
        if sound and self.ambience_channel is None:
            self.ambience_channel = sound.play(loops=-1)
            self.ambience_paused = False

    def pause_ambience(self):
        """Pause the ambience while the window is hidden."""
        if self.ambience_channel is not None and not self.ambience_paused:
            self.ambience_channel.pause()
            self.ambience_paused = True

    def resume_ambience(self):
        """Resume the ambience when the window is shown again."""
        if self.ambience_channel is not None and self.ambience_paused and self.enabled:
            self.ambience_channel.unpause()
            self.ambience_paused = False

    def set_volume(self, volume: float):
        """Set master volume (0.0 to 1.0); each sound keeps its own level under it."""
        self.volume = max(0.0, min(1.0, volume))
        self._apply_volume()

    def _apply_volume(self):
        for name, sound in self.sounds.items():
            sound.set_volume(self.volume * CUE_VOLUMES[name])

    def toggle_sound(self):
        """Toggle sound on/off."""
        self.enabled = not self.enabled
        if self.enabled:
            if self.ambience_channel is None:
                self.start_ambience()
            else:
                self.resume_ambience()
        else:
            self.pause_ambience()
        return self.enabled

    def is_enabled(self) -> bool:
        """Check if sound is enabled."""
        return self.enabled and self.available
