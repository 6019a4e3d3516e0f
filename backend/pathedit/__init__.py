"""Path editor: lossless translation between path text and draggable points."""
