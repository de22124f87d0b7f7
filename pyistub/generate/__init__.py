"""Definitions that render the parts of a stub file, and the stub file writer."""