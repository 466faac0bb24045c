"""Analysis module for lyric syllables and rhymes."""
from .syllables import count_syllables, count_line_syllables, split_lines, analyze_syllables
from .rhyme_detector import RhymeDetector, detect_rhymes, words_rhyme, next_label, get_ending_word
from .report import format_syllable_report, format_rhyme_report
