"""
Material quantity calculators.

Pure Python math. Each formula turns a resolved area into purchasable
units (bags, sheets, tubs, packs, lengths) and their cost.
"""
