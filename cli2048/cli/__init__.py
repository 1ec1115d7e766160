"""Command line front ends for cli2048."""
