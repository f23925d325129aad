import logging

import music_generator.composition
import music_generator.config


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_VOICE = {
	"axiom": "ABCD",
	"rules": ["A->ABA", "B->CxC"],
}


def main () -> None:

	"""
	Build the configured voice and log its schedule.
	"""

	logger.info("Music generator starting...")

	config = music_generator.config.load_config()
	voice_config = music_generator.config.VoiceConfig.from_dict(config.get('voice', DEFAULT_VOICE))

	voice = music_generator.composition.build_voice(voice_config)

	logger.info(
		f"{len(voice)} elements, {voice.get_len()} time units, "
		f"{voice.get_duration(voice_config.bpm):.2f} s at {voice_config.bpm} BPM"
	)

	for event in voice.sequence(voice_config.bpm):

		if event.is_rest:
			logger.info(f"{event.start:8.3f} - {event.stop:8.3f}  rest")
		else:
			logger.info(f"{event.start:8.3f} - {event.stop:8.3f}  {event.frequency:9.3f} Hz  volume {event.volume}")


if __name__ == "__main__":
	main()
