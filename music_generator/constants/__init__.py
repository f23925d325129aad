"""Constants for music_generator.

- ``music_generator.constants.pitch_standards`` - Historical frequencies for A4 in Hz
- ``music_generator.constants.volume`` - Discrete dynamic levels (silent to fff)
- ``music_generator.constants.durations`` - Durations in time units
"""
