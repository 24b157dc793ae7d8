"""Line grammar: classifier, header, posting and year parsers, finalizer, hooks."""
