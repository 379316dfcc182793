"""urlmapper - map local upload folders to remote object-storage URLs at output time."""
