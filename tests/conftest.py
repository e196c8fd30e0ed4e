import hypothesis

# First torch calls can be slow enough to trip the default deadline.
hypothesis.settings.register_profile("torchpoly", deadline=None)
hypothesis.settings.load_profile("torchpoly")
