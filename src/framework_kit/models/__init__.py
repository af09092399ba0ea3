"""Data models for framework-kit.

Import from submodules:
- framework: FrameworkCategory, FrameworkDescriptor, FrameworkManifest
- installed: InstalledFramework, InstalledFrameworksMetadata
- operations: InstallOptions, InstallResult, FrameworkUpdate, UpdateResult
- update_flow: UpdateChoice, UpdatePrompt, DiffComparison
"""
