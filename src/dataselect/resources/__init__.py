"""Resources – cluster object kinds exposed through the selection pipeline."""
