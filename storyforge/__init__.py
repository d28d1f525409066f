# Storyforge: story content generation with pluggable AI backends.
