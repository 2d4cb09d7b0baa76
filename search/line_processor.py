from search.models import SUPPRESSED, Passed


class LineProcessor:
    def __init__(self, config, matcher, highlighter):
        self.config = config
        self.matcher = matcher
        self.highlighter = highlighter

    def process(self, line):
        """
        Returns Passed(text) for a line that should be printed, or SUPPRESSED.
        Filter mode only decides pass/drop and never highlights.
        """
        if self.config.filter_mode:
            return Passed(line) if self.matcher.has_match(line) else SUPPRESSED

        spans = self.matcher.find_all(line)
        if not spans:
            return Passed(line)
        return Passed(self.highlighter.render(line, spans))
